import pytest

from wordscramble.config import DATA_DIR, Settings
from wordscramble.dictionary import DictionaryService
from wordscramble.game_logic import submit
from wordscramble.managers.game import GameManager
from wordscramble.schemas import Accepted, SessionState
from wordscramble.words import FileWordSource


@pytest.fixture(scope='module')
def english():
    return DictionaryService.from_wordfreq('en')


def test_word_set():
    service = DictionaryService({'worm', ' Milk '})
    assert service.is_valid_word('worm', 'en')
    assert service.is_valid_word('WORM')
    assert service.is_valid_word('milk')
    assert not service.is_valid_word('wrom', 'en')
    assert not service.is_valid_word('', 'en')


def test_other_language_is_unknown():
    service = DictionaryService({'worm'}, language='en')
    assert not service.is_valid_word('worm', 'fr')
    assert service('worm', 'EN')


def test_wordfreq_dictionary(english):
    assert len(english) > 50000
    for word in ['worm', 'chairs', 'cat', 'slow', 'skim', 'silo', 'mile']:
        assert english.is_valid_word(word)
    assert not english.is_valid_word('wrom')
    assert not english.is_valid_word('zqxwv')


def test_common_words_from_silkworm_are_accepted(english):
    session = SessionState(id='s1', rootWord='silkworm')
    for raw in ['slow', 'skim', 'sow', 'owls', 'milk', 'worm']:
        result = submit(raw, session, english)
        assert isinstance(result, Accepted), (raw, result)
        session = result.session
    assert session.usedWords == ['worm', 'milk', 'owls', 'sow', 'skim', 'slow']
    assert session.score == 16
    # real words still fail the other checks
    assert submit('silo', session, english).reason == 'prefix'
    assert submit('mile', session, english).reason == 'impossible'


def test_load_skips_blank_and_non_alpha(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('Apple\n\nwell-known\n  pear  \n', encoding='utf-8')
    service = DictionaryService.load_from_txt(path)
    assert len(service) == 2
    assert service.is_valid_word('apple')
    assert service.is_valid_word('pear')


def test_load_skips_undecodable_lines(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_bytes(b'apple\ncaf\xe9\ncaf\xc3\xa9\npear\n')
    service = DictionaryService.load_from_txt(path)
    assert not service.is_valid_word('caf')
    assert service.is_valid_word('café')
    assert service.is_valid_word('apple')
    assert service.is_valid_word('pear')
    assert len(service) == 3


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        DictionaryService.load_from_txt(tmp_path / 'nope.txt')


def test_bundled_start_words():
    words = [w for w in FileWordSource(DATA_DIR / 'start.txt').load() if w]
    assert len(words) == 30
    assert 'silkworm' in words


def test_manager_uses_wordfreq_by_default(sio):
    games = GameManager.from_settings(sio, Settings(dictionary_size=50000))
    assert isinstance(games.oracle, DictionaryService)
    assert games.is_valid_word('slow')
    assert games.max_sessions == 10000


def test_manager_uses_configured_file(sio, tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('worm\n', encoding='utf-8')
    games = GameManager.from_settings(sio, Settings(dictionary_path=path))
    assert games.is_valid_word('worm')
    assert not games.is_valid_word('slow')


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv('WORDSCRAMBLE_START_WORDS', str(tmp_path / 'start.txt'))
    monkeypatch.setenv('WORDSCRAMBLE_DICTIONARY', str(tmp_path / 'words.txt'))
    monkeypatch.setenv('WORDSCRAMBLE_DICTIONARY_SIZE', '5000')
    monkeypatch.setenv('WORDSCRAMBLE_MAX_SESSIONS', '50')
    monkeypatch.setenv('WORDSCRAMBLE_LOG_LEVEL', 'debug')
    monkeypatch.setenv('WORDSCRAMBLE_CORS_ORIGINS', 'http://a.test, http://b.test')
    settings = Settings.from_env()
    assert settings.start_words_path == tmp_path / 'start.txt'
    assert settings.dictionary_path == tmp_path / 'words.txt'
    assert settings.dictionary_size == 5000
    assert settings.max_sessions == 50
    assert settings.language == 'en'
    assert settings.log_level == 'DEBUG'
    assert settings.cors_origins == ['http://a.test', 'http://b.test']


def test_settings_defaults(monkeypatch):
    for name in ['WORDSCRAMBLE_START_WORDS', 'WORDSCRAMBLE_DICTIONARY', 'WORDSCRAMBLE_DICTIONARY_SIZE',
                 'WORDSCRAMBLE_LANGUAGE', 'WORDSCRAMBLE_MAX_SESSIONS', 'WORDSCRAMBLE_LOG_LEVEL',
                 'WORDSCRAMBLE_CORS_ORIGINS']:
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.dictionary_path is None

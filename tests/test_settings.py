from pathlib import Path

from pwdgen import settings
from pwdgen.wordlist import default_words_dir


def test_password_defaults():
    assert settings.get_setting("password.min_length") == 12
    assert settings.get_setting("password.num_digits") == 2
    assert settings.get_setting("password.language") == "en"


def test_missing_setting_returns_default():
    assert settings.get_setting("password.nope", 7) == 7
    assert settings.get_setting("password.min_length.deeper") is None


def test_resolve_path_relative_to_package():
    assert settings.resolve_path("words") == settings.PACKAGE_ROOT / "words"
    assert default_words_dir() == settings.PACKAGE_ROOT / "words"


def test_resolve_path_absolute(tmp_path):
    assert settings.resolve_path(str(tmp_path)) == Path(tmp_path)


def test_password_section_is_mapping():
    section = settings.get_setting("password")
    assert section["punctuation_symbols"][0] == "!"
    assert section["capitalize_words"] is True

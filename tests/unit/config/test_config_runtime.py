import pytest

from objtools.config import runtime
from objtools.config.errors import ConfigurationError
from objtools.config.runtime import env_bool, env_str


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("TEST_BOOL_TRUE", "Yes")
    monkeypatch.setenv("TEST_BOOL_FALSE", "off")
    monkeypatch.setenv("TEST_STR", "  padded  ")

    assert env_bool("TEST_BOOL_TRUE") is True
    assert env_bool("TEST_BOOL_FALSE") is False
    assert env_str("TEST_STR") == "padded"
    assert env_str("TEST_STR", strip=False) == "  padded  "


def test_env_helpers_fall_back(monkeypatch):
    monkeypatch.delenv("MISSING_VALUE", raising=False)
    monkeypatch.setenv("BLANK_VALUE", "   ")

    assert env_str("MISSING_VALUE", "fallback") == "fallback"
    assert env_str("BLANK_VALUE") is None
    assert env_bool("MISSING_VALUE", or_value=False) is False


def test_env_helpers_errors(monkeypatch):
    monkeypatch.delenv("MISSING_VALUE", raising=False)
    with pytest.raises(ConfigurationError, match="is not set"):
        env_str("MISSING_VALUE", required=True)

    with pytest.raises(ConfigurationError, match="is not set"):
        env_bool("MISSING_VALUE", required=True)

    monkeypatch.setenv("BAD_BOOL", "maybe")
    with pytest.raises(ConfigurationError, match="Expected a boolean"):
        env_bool("BAD_BOOL")


def test_env_str_uses_dotenv_defaults(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("FROM_DOTENV=declared\n", encoding="utf-8")
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (dotenv,))
    runtime.reset_default_values()
    monkeypatch.delenv("FROM_DOTENV", raising=False)

    assert env_str("FROM_DOTENV") == "declared"

    monkeypatch.setenv("FROM_DOTENV", "override")
    assert env_str("FROM_DOTENV") == "override"


def test_first_dotenv_declaration_wins(monkeypatch, tmp_path):
    first = tmp_path / "first.env"
    second = tmp_path / "second.env"
    first.write_text("SHARED=one\n", encoding="utf-8")
    second.write_text("SHARED=two\nONLY_SECOND=yes\n", encoding="utf-8")
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (first, second))
    runtime.reset_default_values()
    monkeypatch.delenv("SHARED", raising=False)
    monkeypatch.delenv("ONLY_SECOND", raising=False)

    assert env_str("SHARED") == "one"
    assert env_bool("ONLY_SECOND") is True

"""
Unit tests for environment configuration.
"""

import pytest

from polishpal.env_loader import get_env_flag, load_config

CONFIG_VARS = [
    'POLISHPAL_PROVIDER', 'OPENAI_API_KEY', 'OPENAI_TOKEN', 'OPENAI_MODEL', 'OPENAI_BASE_URL',
    'GEMINI_API_KEY', 'GEMINI_MODEL', 'POLISHPAL_FALLBACK_TO_MOCK', 'POLISHPAL_MAX_TEXT_LENGTH',
    'POLISHPAL_RECORDS_DIR', 'POLISHPAL_DISABLE_RECORDS', 'POLISHPAL_ALIGNMENT',
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadConfig:
    """Test cases for building the create_app() config from the environment."""

    def test_defaults(self, clean_env):
        config = load_config()

        assert config['POLISHPAL_PROVIDER'] == 'openai'
        assert config['POLISHPAL_API_KEY'] is None
        assert config['POLISHPAL_MAX_TEXT_LENGTH'] == 5000
        assert config['POLISHPAL_RECORDS_DIR'] == 'records'
        assert config['POLISHPAL_ALIGNMENT'] == 'positional'
        assert config['POLISHPAL_FALLBACK_TO_MOCK'] is False
        assert config['POLISHPAL_DISABLE_RECORDS'] is False

    def test_openai_token_alias(self, clean_env):
        clean_env.setenv('OPENAI_TOKEN', 'token-key')
        clean_env.setenv('OPENAI_BASE_URL', 'http://localhost:8080/v1')

        config = load_config()

        assert config['POLISHPAL_API_KEY'] == 'token-key'
        assert config['OPENAI_BASE_URL'] == 'http://localhost:8080/v1'

    def test_gemini_settings(self, clean_env):
        clean_env.setenv('POLISHPAL_PROVIDER', 'Gemini')
        clean_env.setenv('OPENAI_API_KEY', 'openai-key')
        clean_env.setenv('GEMINI_API_KEY', 'gemini-key')
        clean_env.setenv('GEMINI_MODEL', 'gemini-2.5-flash')

        config = load_config()

        assert config['POLISHPAL_PROVIDER'] == 'gemini'
        assert config['POLISHPAL_API_KEY'] == 'gemini-key'
        assert config['POLISHPAL_MODEL'] == 'gemini-2.5-flash'

    def test_switches_and_limits(self, clean_env):
        clean_env.setenv('POLISHPAL_FALLBACK_TO_MOCK', 'true')
        clean_env.setenv('POLISHPAL_DISABLE_RECORDS', '1')
        clean_env.setenv('POLISHPAL_MAX_TEXT_LENGTH', '200')

        config = load_config()

        assert config['POLISHPAL_FALLBACK_TO_MOCK'] is True
        assert config['POLISHPAL_DISABLE_RECORDS'] is True
        assert config['POLISHPAL_MAX_TEXT_LENGTH'] == 200


def test_get_env_flag(clean_env):
    clean_env.setenv('POLISHPAL_FALLBACK_TO_MOCK', 'off')
    assert get_env_flag('POLISHPAL_FALLBACK_TO_MOCK') is False
    assert get_env_flag('POLISHPAL_DISABLE_RECORDS', default=True) is True

"""
Centralized Environment Variable Loader for PolishPal

Loads the .env file exactly once, even when several request threads
touch configuration at the same time.
"""

import os
import logging
import threading
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_env_loaded = False
_env_lock = threading.Lock()

_TRUTHY = ('1', 'true', 'yes', 'on')


def load_environment_once() -> bool:
    """
    Load environment variables exactly once in a thread-safe manner.

    Returns:
        bool: True if environment was loaded, False if already loaded
    """
    global _env_loaded

    with _env_lock:
        if _env_loaded:
            return False

        load_dotenv()
        _env_loaded = True

        if os.getenv('OPENAI_API_KEY') or os.getenv('OPENAI_TOKEN'):
            logger.debug("Env loaded - OpenAI credential present")
        else:
            logger.debug("Env loaded - OpenAI credential missing")

        return True


def get_env_var(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get environment variable, ensuring environment is loaded first.

    Args:
        key: Environment variable name
        default: Default value if not found

    Returns:
        Environment variable value or default
    """
    load_environment_once()
    return os.getenv(key, default)


def get_env_flag(key: str, default: bool = False) -> bool:
    """Read a boolean switch such as POLISHPAL_FALLBACK_TO_MOCK=1."""
    value = get_env_var(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


def load_config() -> Dict[str, Any]:
    """
    Collect PolishPal settings from the environment into a create_app() config.

    The API key and model are resolved for the selected provider, so the
    Flask layer only ever sees POLISHPAL_API_KEY / POLISHPAL_MODEL.
    """
    provider = (get_env_var('POLISHPAL_PROVIDER') or 'openai').lower()

    if provider == 'gemini':
        api_key = get_env_var('GEMINI_API_KEY')
        model = get_env_var('GEMINI_MODEL')
    else:
        api_key = get_env_var('OPENAI_API_KEY') or get_env_var('OPENAI_TOKEN')
        model = get_env_var('OPENAI_MODEL')

    return {
        'POLISHPAL_PROVIDER': provider,
        'POLISHPAL_API_KEY': api_key,
        'POLISHPAL_MODEL': model,
        'OPENAI_BASE_URL': get_env_var('OPENAI_BASE_URL'),
        'POLISHPAL_FALLBACK_TO_MOCK': get_env_flag('POLISHPAL_FALLBACK_TO_MOCK'),
        'POLISHPAL_MAX_TEXT_LENGTH': int(get_env_var('POLISHPAL_MAX_TEXT_LENGTH', '5000')),
        'POLISHPAL_RECORDS_DIR': get_env_var('POLISHPAL_RECORDS_DIR', 'records'),
        'POLISHPAL_DISABLE_RECORDS': get_env_flag('POLISHPAL_DISABLE_RECORDS'),
        'POLISHPAL_ALIGNMENT': get_env_var('POLISHPAL_ALIGNMENT', 'positional'),
    }


def is_env_loaded() -> bool:
    """Check if environment variables have been loaded."""
    return _env_loaded

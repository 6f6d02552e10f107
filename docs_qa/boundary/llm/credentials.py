"""
Provider credential checks.

Dependencies: pydantic, docs_qa.core.exceptions
System role: Fail fast on missing API keys before any network call
"""

from pydantic import SecretStr

from docs_qa.core.exceptions import ConfigurationError

API_KEY_SETTING = "OPENAI_API_KEY"


def require_api_key(api_key: SecretStr | None) -> SecretStr:
    """
    Return the API key or raise when it is absent or empty.

    Raises:
        ConfigurationError: If no usable key is configured
    """
    if api_key is None or not api_key.get_secret_value().strip():
        raise ConfigurationError(
            f"{API_KEY_SETTING} environment variable is not set",
            setting=API_KEY_SETTING,
        )
    return api_key

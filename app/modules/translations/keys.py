"""Cache key scheme for translations.

Format (inspected by external tooling, keep exact):
``config:{config_id}:lang:{language_code}`` with a normalized language code.
"""

# Every populated entry expires this many seconds after it was written
CACHE_TTL_SECONDS = 3600


def build_cache_key(config_id: int, language_code: str) -> str:
    """Cache key for one (configuration, language) slot."""
    return f"config:{config_id}:lang:{language_code}"


def build_config_pattern(config_id: int) -> str:
    """Glob pattern matching every language slot of a configuration."""
    return f"config:{config_id}:lang:*"

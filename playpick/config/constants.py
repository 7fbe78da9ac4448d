"""
Configuration-related constants and resource limits.
"""

# Maximum config file size (10MB)
MAX_CONFIG_SIZE_BYTES = 10 * 1024 * 1024

DEFAULT_CONFIG_FILENAME = "playpick.yaml"

# Environment variables with this prefix override config values,
# e.g. PLAYPICK_LOGGING_LEVEL=debug -> logging.level
ENV_PREFIX = "PLAYPICK_"

"""
Package Default Values
All hardcoded values should be defined here and accessed via Config.get()
This file contains sensible defaults that can be overridden in config modules or .env
"""

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

# Require display names to be valid Python identifiers
DEFAULT_STRICT_NAMES = True

# Name reported for the default display in logs and errors
DEFAULT_DISPLAY_NAME = '__default__'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOGGER_NAME = 'viewable'
DEFAULT_LOG_FORMAT = 'text'  # 'text' or 'json'
DEFAULT_LOG_ENV = 'production'
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5

# ============================================================================
# CONFIG DEFAULTS
# ============================================================================

# Package searched for application config modules (config/view.py, ...)
DEFAULT_CONFIG_PACKAGE = 'config'

# Prefix for environment variable fallbacks (VIEWABLE_VIEW_STRICT_NAMES, ...)
DEFAULT_ENV_PREFIX = 'VIEWABLE'

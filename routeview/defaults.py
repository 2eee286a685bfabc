"""
Package Default Values
All hardcoded values should be defined here and accessed via Config.get()
These defaults can be overridden in config/view.py, config/app.py or .env
"""

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

DEFAULT_TEMPLATE_PATHS = ['templates']
DEFAULT_BASE_PATH = ''
DEFAULT_ATTRIBUTE_NAME = 'view'  # request.ctx attribute holding the engine
DEFAULT_AUTOESCAPE_EXTENSIONS = ('html', 'htm', 'xml')

# ============================================================================
# URI DEFAULTS
# ============================================================================

DEFAULT_PORTS = {
    'http': 80,
    'https': 443,
}

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_APP_ENV = 'production'

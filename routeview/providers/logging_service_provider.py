"""
Logging Service Provider
Initializes the package logger
"""
from routeview.service_provider import ServiceProvider
from routeview.logging.logger_config import LoggerConfig
from routeview.support import Config


class LoggingServiceProvider(ServiceProvider):
    """Logging service provider - sets up structured logging"""

    def register(self):
        """Register logging services"""
        LoggerConfig.setup_logger(
            name='routeview',
            format_type=Config.get('app.LOG_FORMAT', 'json'),
            file_name=Config.get('app.LOG_FILE'),
            max_bytes=Config.get('app.LOG_MAX_BYTES'),
            backup_count=Config.get('app.LOG_BACKUP_COUNT'),
            enable_console=Config.get('app.LOG_CONSOLE', True),
        )

import logging
from logging.handlers import RotatingFileHandler


class LoggingManager:
    def __init__(self, app):
        self.app = app

    def build_handlers(self, level):
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handlers = [logging.StreamHandler()]

        log_file = self.app.config.get("LOG_FILE")
        if log_file:
            handlers.append(RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5, delay=True))

        for handler in handlers:
            handler.setFormatter(formatter)
            handler.setLevel(level)
        return handlers

    def setup_logging(self):
        level = getattr(logging, str(self.app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)

        # Module loggers live under the "app" and "core" namespaces and share one set of handlers
        handlers = None
        for name in ("app", "core"):
            logger = logging.getLogger(name)
            logger.setLevel(level)
            if logger.handlers:
                continue
            if handlers is None:
                handlers = self.build_handlers(level)
            for handler in handlers:
                logger.addHandler(handler)

        self.app.logger.setLevel(level)

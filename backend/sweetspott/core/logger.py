import logging
import os
from logging.handlers import RotatingFileHandler
from sweetspott.core.config import settings

class LoggerConfig:
    """
    Application logger: rotating file + console, with the provider API key
    masked out of every message.
    """
    def __init__(
        self, env=20, logger_name="SweetSpott", log_directory="logs", log_file="app.log", secrets=()
    ):
        try:
            self.logger_name = logger_name
            self.log_directory = os.path.abspath(log_directory)
            self.log_file_path = os.path.join(self.log_directory, log_file)
            self.env = env
            self.log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            self.secrets = [s for s in secrets if s and len(s) >= 10]

            self.logger = logging.getLogger(self.logger_name)
            self.setup_logger()
        except Exception as e:
            print(f"Failed to initialize logger: {str(e)}")

    def setup_logger(self):
        try:
            os.makedirs(self.log_directory, exist_ok=True)

            file_handler = RotatingFileHandler(
                self.log_file_path, backupCount=5, maxBytes=1024 * 1024 * 10, encoding="utf-8"
            )
            console_handler = logging.StreamHandler()

            formatter = logging.Formatter(self.log_format)
            for handler in (file_handler, console_handler):
                handler.setLevel(self.env)
                handler.setFormatter(formatter)

            # Avoid adding duplicate handlers if re-initialized
            if not self.logger.handlers:
                self.logger.addHandler(file_handler)
                self.logger.addHandler(console_handler)

            self.logger.setLevel(self.env)

        except Exception as e:
            print(f"Failed to setup logger handlers: {str(e)}")

    def redact(self, message: str) -> str:
        """Replaces each configured secret with its first 6 characters."""
        for secret in self.secrets:
            message = message.replace(secret, f"{secret[:6]}...")
        return message

    def log(self, level: int, message: str, extra: dict = None):
        if extra:
            message = f"{message} | {extra}"
        self.logger.log(level, self.redact(message))

logs = LoggerConfig(
    env=settings.LOGGER,
    logger_name="SWEETSPOTT-BE",
    log_directory=settings.LOG_DIRECTORY,
    log_file="sweetspott.log",
    secrets=[settings.GOOGLE_MAPS_API_KEY],
)

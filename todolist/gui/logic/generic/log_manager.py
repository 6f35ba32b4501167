"""
Log Manager for GUI application.

Provides centralized logging management and configuration.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from todolist.core.settings.settings import TodoSettings, get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
QUIET_LOGGERS = ('PySide6', 'pymongo', 'motor')


class LogManager:
    """Singleton log manager for the GUI application."""

    _instance: Optional['LogManager'] = None
    _initialized = False

    def __new__(cls, settings: Optional[TodoSettings] = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_instance(cls) -> 'LogManager':
        """Get the singleton instance of LogManager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self, settings: Optional[TodoSettings] = None):
        if not self._initialized:
            self.settings = settings or get_settings()
            self.log_file: Optional[Path] = None
            self.setup_logging()
            self._initialized = True

    def setup_logging(self):
        """Set up logging configuration."""
        log_dir = Path(self.settings.logs_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d')
        self.log_file = log_dir / f'gui_{timestamp}.log'

        level = logging.getLevelName(self.settings.log_level)
        self.handlers = [
            logging.FileHandler(self.log_file),
            logging.StreamHandler(sys.stdout)
        ]
        logging.basicConfig(level=level, format=LOG_FORMAT, handlers=self.handlers)
        logging.getLogger().setLevel(level)

        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

        self.logger = logging.getLogger(__name__)
        self.logger.info(f"LogManager initialized, writing to {self.log_file}")

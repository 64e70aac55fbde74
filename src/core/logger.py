import sys
import logging

from datetime import date
from pathlib import Path
from termcolor import colored

from core.globals import LOGS_DIR


__all__ = ['init_logger', 'info', 'error', 'warn', 'debug', 'exception']


logger = logging.getLogger("SECTEXT")
info = logger.info
error = logger.error
warn = logger.warning
debug = logger.debug
exception = logger.exception

FMT = '%(asctime)s %(levelname)s [%(filename)s] %(message)s'
DATE_FMT = '%Y%m%d %H:%M:%S'

LEVEL_COLORS = {
    logging.ERROR: 'red',
    logging.CRITICAL: 'red',
    logging.WARNING: 'yellow',
}


class ColoredFormatter(logging.Formatter):
    """Colors the level name of warnings and errors for terminal output."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        levelname = record.levelname
        record.levelname = colored(levelname, color)
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class DailyFileHandler(logging.FileHandler):
    """
    Writes to ``<log_dir>/<YYYYMMDD>.log``, switching files when the date
    changes between two records.
    """

    def __init__(self, log_dir: Path, encoding: str = 'utf-8'):
        self.log_dir = Path(log_dir)
        self.current_date = date.today()
        super().__init__(self._path_for(self.current_date), encoding=encoding, delay=True)

    def _path_for(self, day: date) -> Path:
        return self.log_dir / f"{day:%Y%m%d}.log"

    def emit(self, record: logging.LogRecord) -> None:
        today = date.today()
        if today != self.current_date:
            # Called under the handler lock; the next write reopens the stream
            if self.stream:
                self.stream.close()
                self.stream = None
            self.baseFilename = str(self._path_for(today).resolve())
            self.current_date = today
        super().emit(record)


def init_logger(debug_on: bool, log_to_file: bool = True) -> None:
    """Initialize the application logger with console and file handlers.

    Args:
        debug_on: Whether to enable debug logging
        log_to_file: Whether to also write daily log files under LOGS_DIR
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter(FMT, DATE_FMT))
    handlers: list[logging.Handler] = [console_handler]

    if log_to_file:
        LOGS_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = DailyFileHandler(LOGS_DIR)
        file_handler.setFormatter(logging.Formatter(FMT, DATE_FMT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if debug_on else logging.INFO,
        handlers=handlers,
        force=True,
    )

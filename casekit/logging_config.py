import logging
from typing import Optional

from .config import get_settings

# ANSI color codes for colorful logs
COLORS = {
    'RED': '\033[0;31m',
    'GREEN': '\033[0;32m',
    'YELLOW': '\033[0;33m',
    'BLUE': '\033[0;34m',
    'CYAN': '\033[0;36m',
    'BOLD_RED': '\033[1;31m',
    'BOLD_GREEN': '\033[1;32m',
    'BOLD_YELLOW': '\033[1;33m',
    'BOLD_BLUE': '\033[1;34m',
    'RESET': '\033[0m',
}

PLAIN_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%H:%M:%S'


# Custom formatter to add colors based on log level
class ColoredFormatter(logging.Formatter):
    FORMATS = {
        logging.DEBUG: COLORS['BLUE'] + '%(asctime)s ' + COLORS['BOLD_BLUE'] + '[%(levelname)s]' + COLORS['RESET'] + ' %(name)s: %(message)s',
        logging.INFO: COLORS['GREEN'] + '%(asctime)s ' + COLORS['BOLD_GREEN'] + '[%(levelname)s]' + COLORS['RESET'] + ' %(name)s: ' + COLORS['CYAN'] + '%(message)s' + COLORS['RESET'],
        logging.WARNING: COLORS['YELLOW'] + '%(asctime)s ' + COLORS['BOLD_YELLOW'] + '[%(levelname)s]' + COLORS['RESET'] + ' %(name)s: %(message)s',
        logging.ERROR: COLORS['RED'] + '%(asctime)s ' + COLORS['BOLD_RED'] + '[%(levelname)s]' + COLORS['RESET'] + ' %(name)s: %(message)s',
        logging.CRITICAL: COLORS['BOLD_RED'] + PLAIN_FORMAT + COLORS['RESET'],
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, PLAIN_FORMAT)
        formatter = logging.Formatter(log_fmt, datefmt=DATE_FORMAT)
        return formatter.format(record)


def setup_logging(level: Optional[str] = None, color: Optional[bool] = None) -> logging.Logger:
    settings = get_settings()
    log_level = (level or settings.log_level).upper()
    use_color = settings.log_color if color is None else color

    logging.basicConfig(level=getattr(logging, log_level))
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))

    # Set higher log level for some verbose modules
    logging.getLogger('uvicorn').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)

    formatter = ColoredFormatter() if use_color else logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT)
    for handler in root_logger.handlers:
        handler.setFormatter(formatter)

    return logging.getLogger('casekit')

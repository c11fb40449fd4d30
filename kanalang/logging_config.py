"""
Logging setup shared by the kanalang command-line tools.
"""
import logging
import sys
from datetime import datetime


class ProgressLogger:
    """
    Reports batch translation progress as log lines instead of a progress bar,
    so piped stdout only carries translations.
    """
    def __init__(self, total, desc="Translating", logger=None, step_percent=10):
        self.total = total
        self.current = 0
        self.desc = desc
        self.logger = logger or logging.getLogger()
        self.step_percent = step_percent
        self.start_time = datetime.now()
        self.last_log_percent = -1

    @property
    def percent(self) -> int:
        return int(self.current * 100 / self.total) if self.total > 0 else 0

    def _eta_seconds(self) -> float:
        elapsed = (datetime.now() - self.start_time).total_seconds()
        if elapsed <= 0 or self.current == 0:
            return 0
        return (self.total - self.current) / (self.current / elapsed)

    def update(self, n=1, item_desc=None):
        """Advance by n lines. Logs on every step_percent boundary and on the last line."""
        self.current += n
        percent = self.percent
        finished = self.current == self.total
        if percent - self.last_log_percent < self.step_percent and not item_desc and not finished:
            return

        message = f"{self.desc}: {self.current}/{self.total} ({percent}%)"
        if item_desc:
            message += f" - {item_desc}"
        eta = self._eta_seconds()
        if eta > 0 and self.current < self.total:
            message += f" [ETA: {int(eta)}s]"

        self.logger.info(message)
        self.last_log_percent = percent

    def close(self):
        """Log the final count if the batch stopped short."""
        if self.current < self.total:
            self.current = self.total
            self.update(0)


def setup_logging(log_file=None, level=logging.WARNING, debug=False):
    """
    Set up logging for the command-line tools.

    Console output goes to stderr so translations on stdout stay clean.

    Args:
        log_file: Optional path to a log file (appended to).
        level: Logging level (default: WARNING).
        debug: If True, enables DEBUG level with file/line context.
    """
    # Clear existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG

    if debug:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    else:
        format_string = '%(asctime)s - %(levelname)s - %(message)s'

    handlers = []
    console_handler = logging.StreamHandler(sys.stderr)
    handlers.append(console_handler)

    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(format_string))
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Add run separator
    logging.info("=" * 80)
    logging.info(f"NEW RUN STARTED - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    if debug:
        logging.info("DEBUG MODE ENABLED - Verbose logging active")
    logging.info("=" * 80)


def log_with_context(message, context=None, level=logging.DEBUG, logger=None):
    """
    Log a message with additional context (inputs, state, etc.).

    Args:
        message: Main log message
        context: Dict of contextual information
        level: Log level (default: DEBUG)
        logger: Logger to use (default: root logger)
    """
    logger = logger or logging.getLogger()
    logger.log(level, message)

    if context and logger.isEnabledFor(logging.DEBUG):
        for key, value in context.items():
            # Truncate long values
            str_value = str(value)
            if len(str_value) > 200:
                str_value = str_value[:200] + "..."
            logger.debug(f"  └─ {key}: {str_value}")

"""Logging helper module."""

from logging import (
    DEBUG,
    INFO,
    WARNING,
    FileHandler,
    Formatter,
    Handler,
    Logger,
    StreamHandler,
    getLogger,
)
from pathlib import Path

DEFAULT_LOG_FILE = Path("errormsg.log")
"""File that receives the full log when logging is initialized."""

_installed_handlers: list[Handler] = []
"""Root handlers added by the last init_logging call."""


def init_logging(*, verbose: bool = False, log_file: Path | None = None) -> None:
    """Initialize logging for the application.

    Should be called once when the application starts. Calling it again
    replaces the handlers installed by the previous call.

    Args:
        verbose: Enables DEBUG level logging.
        log_file: Where to write the file log. Defaults to DEFAULT_LOG_FILE.

    """
    root_logger = getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()
    root_logger.setLevel(INFO)

    # File log with full detail
    file_handler = FileHandler(log_file or DEFAULT_LOG_FILE, mode="w")
    file_handler.setFormatter(
        Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
    )
    root_logger.addHandler(file_handler)

    # Console handler for user-facing logs
    console_handler = StreamHandler()
    console_handler.setLevel(INFO)
    console_handler.setFormatter(Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.extend([file_handler, console_handler])

    configure_3p_loggers(root_logger)

    if verbose:
        root_logger.setLevel(DEBUG)
        console_handler.setLevel(DEBUG)
        root_logger.debug("Debug logging enabled.")


def get_logger(name: str) -> Logger:
    """Proxy for logging.getLogger."""
    return getLogger(name)


def configure_3p_loggers(root_logger: Logger) -> None:
    """Drop handlers of third-party loggers so they only reach the root handlers."""
    for name in list(root_logger.manager.loggerDict):
        if name.startswith("errormsg"):
            continue  # Skip our own loggers
        third_party_logger = getLogger(name)
        third_party_logger.handlers.clear()

    # lark reports grammar analysis details at INFO and DEBUG
    getLogger("lark").setLevel(WARNING)

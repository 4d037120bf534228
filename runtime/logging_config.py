import logging
from typing import Optional

LOGGER_NAME = "bfgs_solver"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(
    log_file: Optional[str] = None,
    *,
    quiet: bool = False,
    debug: bool = False,
) -> logging.Logger:
    """Configure and return the shared solver logger.

    Handlers from a previous call are replaced. ``debug`` lowers the logger and
    every handler to DEBUG, so per-iteration and line-search records reach the
    console as well as the optional ``log_file``. ``quiet`` drops the console
    handler only.
    """
    logger = logging.getLogger(LOGGER_NAME)
    # Propagation stays on so pytest's caplog sees records in quiet runs.
    logger.propagate = True

    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = []
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="w"))
        except OSError as exc:
            print(f"[logging] Could not open log file '{log_file}': {exc}")
    if not quiet:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger

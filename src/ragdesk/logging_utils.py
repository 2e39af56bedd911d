"""Logging configuration for applications using ragdesk.

Library modules only create loggers; handlers are installed here, by the
application (the CLI calls configure_logging once at startup).
"""

import logging
import sys

from rich.logging import RichHandler

# Third-party loggers that are noisy at INFO
_NOISY_LOGGERS = ("LiteLLM", "LiteLLM Router", "LiteLLM Proxy", "httpx", "httpcore")


def configure_logging(level: int | str = logging.INFO, rich: bool = True) -> None:
    """Configure the root logger.

    Args:
        level: Log level for ragdesk loggers (e.g. logging.DEBUG or "DEBUG")
        rich: Use rich's RichHandler; otherwise a plain stderr handler with
              ISO timestamps.
    """
    root_logger = logging.getLogger()
    # Remove any existing handlers to avoid duplicates
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    handler: logging.Handler
    if rich:
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

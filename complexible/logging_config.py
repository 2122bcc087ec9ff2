import logging
import sys

from environs import Env


def setup_logging(env: Env | None = None) -> None:
    """Set up logging configuration."""
    if logging.root.handlers:  # Check if logging is already configured
        return

    if env is None:
        env = Env()

    log_level_str = env.str("COMPLEXIBLE_LOG_LEVEL", "WARNING").upper()

    # DEBUG flag overrides log level when set to True
    if env.bool("COMPLEXIBLE_DEBUG", default=False):
        log_level_str = "DEBUG"

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level_str}")

    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stdout,
    )

    # Kernel loggers (power path selection, domain failures) follow the same level
    logging.getLogger("complexible").setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)

import logging
from rich.console import Console
from rich.logging import RichHandler
from yt_transcriber.config import settings

# stdout carries the transcript itself, so logs go to stderr
stderr_console = Console(stderr=True)

def setup_logger(name: str = "yt_transcriber") -> logging.Logger:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=stderr_console, rich_tracebacks=True)]
    )
    return logging.getLogger(name)

def set_level(level: str):
    logging.getLogger().setLevel(level)
    logger.setLevel(level)

logger = setup_logger()

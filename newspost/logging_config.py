import logging

from .config import LOG_LEVEL


def configure_logging(level: str = None) -> None:
    """Configure root logging once.

    Calls basicConfig only when the root logger has no handlers; otherwise
    only the level is adjusted so test harnesses keep their own handlers.
    """
    chosen = (level or LOG_LEVEL or 'INFO').upper()
    lvl = getattr(logging, chosen, logging.INFO)
    root = logging.getLogger()

    if not root.handlers:
        logging.basicConfig(
            format='[%(asctime)s] %(levelname)s %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
            level=lvl,
        )
    else:
        root.setLevel(lvl)

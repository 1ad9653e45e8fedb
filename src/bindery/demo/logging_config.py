import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install one stream handler on the root logger.

    Calling it again only updates the level.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if not any(getattr(handler, "_bindery_demo", False) for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._bindery_demo = True  # type: ignore[attr-defined]
        root.addHandler(handler)

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the root logger unless one is already set."""
    resolved = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(resolved)
    stream_handler.setFormatter(formatter)

    root_logger.setLevel(resolved)
    root_logger.addHandler(stream_handler)

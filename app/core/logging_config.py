"""Logging setup for the user query service."""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger unless one is already present."""

    logger = logging.getLogger()
    if logger.handlers:
        # Configured already, e.g. by uvicorn or by a previous create_app call.
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)


__all__ = ["setup_logging"]

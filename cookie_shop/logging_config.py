# cookie_shop/logging_config.py
import logging


def setup_logging(level="INFO"):
    logger = logging.getLogger()
    if not logger.handlers:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return logger

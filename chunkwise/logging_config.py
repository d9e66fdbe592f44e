import logging.config

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "root": {"level": "INFO", "handlers": ["console"]},
}


def configure_logging(level: str = "INFO") -> None:
    """Install the JSON console logging setup with the given root *level*."""
    config = dict(LOGGING_CONFIG)
    config["root"] = {**LOGGING_CONFIG["root"], "level": level}
    logging.config.dictConfig(config)

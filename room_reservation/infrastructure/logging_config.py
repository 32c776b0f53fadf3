import logging

LOGGER_NAME = "room_reservation"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Настраивает логгер пакета. Повторный вызов меняет только уровень."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    # Свой обработчик уже есть, корневому логгеру записи не передаются
    logger.propagate = False

    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    return logger

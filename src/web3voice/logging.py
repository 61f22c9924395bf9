import logging
import os
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "web3voice-gateway"

_handler: logging.Handler | None = None


def setup_logging():
    """
    Configures structured JSON logging for the gateway.

    Every record carries timestamp, level, logger name, message and the
    ddtrace ``trace_id``/``span_id`` pair, plus a static ``service`` field.
    The root logger and the Uvicorn loggers share a single stdout handler,
    installed on the first call; later calls return the same root logger.
    The level comes from ``LOG_LEVEL`` (default INFO).

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _handler

    root_logger = logging.getLogger()
    if _handler is not None:
        return root_logger

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
        static_fields={"service": SERVICE_NAME},
    )
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(formatter)

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    root_logger.setLevel(level)
    root_logger.handlers = [_handler]

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [_handler]
        u_logger.propagate = False

    return root_logger

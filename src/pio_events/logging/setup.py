import logging
import sys

import structlog
from pythonjsonlogger import jsonlogger
from structlog.stdlib import LoggerFactory

from ..config import Settings, get_settings

SDK_NAME = "pio-events"

RENDERERS = {
    "json": structlog.processors.JSONRenderer,
    "console": lambda: structlog.dev.ConsoleRenderer(colors=True),
}


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    settings: Settings | None = None,
) -> None:
    """
    Configure structlog for an application that embeds the SDK.

    The SDK only emits through ``get_logger`` and never calls this itself.
    Arguments left as None fall back to ``settings`` (or the environment).

    Args:
        level: Log level name, e.g. "DEBUG"
        format_type: "json" or "console"; unknown values render JSON
        settings: Settings to read defaults from
    """
    settings = settings or get_settings()
    level = (level or settings.log_level).upper()
    format_type = format_type or settings.log_format

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
    )

    structlog.configure(
        processors=build_processors(format_type),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    if format_type != "console":
        _use_json_root_handler()


def build_processors(format_type: str) -> list:
    """Processor chain ending in the renderer for ``format_type``"""
    renderer = RENDERERS.get(format_type, RENDERERS["json"])
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_sdk_context(),
        renderer(),
    ]


def _use_json_root_handler() -> None:
    # stdlib loggers outside structlog get the same JSON shape
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    )
    logging.getLogger().handlers = [handler]


def add_sdk_context():
    """Processor stamping the SDK name and version on every entry"""
    from .. import __version__

    def processor(logger, method_name, event_dict):
        event_dict.setdefault("sdk", SDK_NAME)
        event_dict.setdefault("sdk_version", __version__)
        return event_dict

    return processor


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)

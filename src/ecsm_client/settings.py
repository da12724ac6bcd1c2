"""Configuration and logging setup for the ECSM client."""

import json
import logging
import os
import pathlib
import typing

import pydantic
import structlog

from .rest import DEFAULT_API_PREFIX, DEFAULT_TIMEOUT, build_base_url

CONFIG_ENV_VAR = "ECSM_CLIENT_CONFIG_PATH"


class ClientConfig(pydantic.BaseModel):
    """Connection settings for an ECSM server."""

    protocol: str = pydantic.Field("http", description="URL scheme, http or https")
    host: str = pydantic.Field(description="ECSM server host name or address")
    port: int = pydantic.Field(3001, description="ECSM server port", gt=0, lt=65536)
    api_prefix: str = pydantic.Field(
        DEFAULT_API_PREFIX,
        description="Version prefix of the REST API",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")
    log_format: typing.Literal["logfmt", "json"] = pydantic.Field(
        "logfmt",
        description="Rendering of log lines",
    )

    @property
    def base_url(self) -> str:
        return build_base_url(self.protocol, self.host, self.port, self.api_prefix)


def configure_logging(log_level: str, log_format: str = "logfmt") -> None:
    """Route ECSM client logs through structlog.

    Args:
        log_level: Minimum level name, e.g. ``"DEBUG"``; unknown names mean
            ``INFO``.
        log_format: ``"logfmt"`` for key=value lines or ``"json"`` for one
            JSON object per line.

    Loggers are not cached, so calling this again takes effect for
    module-level loggers that have already been used.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    if log_format == "json":
        exc_processor = structlog.processors.dict_tracebacks
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        exc_processor = structlog.processors.format_exc_info
        renderer = structlog.processors.LogfmtRenderer(key_order=("timestamp", "level", "msg"))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.EventRenamer("msg"),
            exc_processor,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def load_config(config_path: str | None = None) -> ClientConfig:
    """Load configuration from a JSON file.

    Falls back to the path in ``ECSM_CLIENT_CONFIG_PATH`` when no path is
    given.
    """
    resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not resolved_path:
        msg = f"No configuration path given and {CONFIG_ENV_VAR} is not set"
        raise FileNotFoundError(msg)

    path = pathlib.Path(resolved_path)
    if not path.exists():
        msg = f"Configuration file not found: {resolved_path}"
        raise FileNotFoundError(msg)

    with path.open("r") as f:
        data = json.load(f)

    return ClientConfig(**data)

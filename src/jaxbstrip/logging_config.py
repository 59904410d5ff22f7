# Author: Bradley R. Kinnard — logs or it didn't happen

"""Structlog config. JSON by default, pretty with VERBOSE. Run ID injected from context."""

import logging
import os
import sys
from contextvars import ContextVar
import structlog

run_id_ctx: ContextVar[str | None] = ContextVar("run_id", default=None)


def set_run_id(rid: str) -> None:
    run_id_ctx.set(rid)


def _add_run_id(logger, method, event_dict):
    rid = run_id_ctx.get()
    if rid:
        event_dict["run_id"] = rid
    return event_dict


def setup_logging(level: str = "INFO") -> None:
    """Wire up structlog once, from the cli or the app lifespan. VERBOSE env var for colorful output."""
    is_dev = os.getenv("VERBOSE", "").lower() in ("1", "true", "yes")

    shared = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_run_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if not is_dev:
        shared.append(structlog.processors.format_exc_info)  # console renderer does its own tracebacks

    renderer = structlog.dev.ConsoleRenderer(colors=True) if is_dev else structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )

    # stderr, stdout belongs to whatever build tool is piping us
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

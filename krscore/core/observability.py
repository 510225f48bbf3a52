"""Observability helpers for krscore.

Structured logging is provided by structlog on top of the stdlib logging
module, so library code keeps using ``logging.getLogger(__name__)`` while
entry points decide the output format via ``configure_logging``.

``debug_wrapper`` traces a call: arguments, result, duration and any
exception (logged with traceback, then re-raised).
"""

import functools
import json
import logging
import re
import sys
import time
import traceback
from collections.abc import Callable
from typing import Any, TypeVar, cast

import structlog
from pydantic import BaseModel
from structlog.contextvars import bind_contextvars, unbind_contextvars

logger = structlog.get_logger("krscore")

F = TypeVar("F", bound=Callable[..., Any])

# Sensitive data redaction pattern
_SENSITIVE_KEY_RE = re.compile(
    r"(token|key|secret|password|pass|authorization|auth|client_secret)", re.IGNORECASE
)


def configure_logging(level: str = "INFO", *, json_output: bool | None = None) -> None:
    """Route stdlib logging and structlog through one structured pipeline.

    ``json_output=None`` picks the console renderer on a TTY and JSON otherwise.
    """
    if json_output is None:
        json_output = not sys.stderr.isatty()

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    final_processors: list[Any] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if json_output:
        final_processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        final_processors.append(structlog.dev.ConsoleRenderer())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=final_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level.upper())


def _mask_scalar(value: Any) -> Any:
    if value is None:
        return None
    s = str(value)
    if len(s) <= 8:
        return "***"
    return f"{s[:4]}…{s[-3:]}"


def _redact_obj(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {
            k: (_mask_scalar(v) if _SENSITIVE_KEY_RE.search(str(k)) else _redact_obj(v))
            for k, v in obj.items()
        }
    if isinstance(obj, list):
        return [_redact_obj(i) for i in obj]
    return obj


def _safe_serialize_kv(key: str, value: Any, max_length: int) -> Any:
    ser = _serialize_value(value, max_length)
    if _SENSITIVE_KEY_RE.search(str(key)):
        if isinstance(ser, (dict, list)):
            return _redact_obj(ser)
        return _mask_scalar(ser)
    return ser


def _serialize_value(value: Any, max_length: int = 1000) -> Any:
    """Safely serialize a value for logging.

    Pydantic models are dumped in JSON mode; anything else goes through
    json.dumps(default=str) and is truncated past ``max_length``.
    """
    try:
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json", by_alias=True)

        json_str = json.dumps(value, default=str)
        if len(json_str) > max_length:
            return json_str[:max_length] + "..."
        return json.loads(json_str)

    except (TypeError, ValueError):
        str_repr = str(value)
        if len(str_repr) > max_length:
            return str_repr[:max_length] + "..."
        return str_repr


class CallTrace(BaseModel):
    """What one traced call logged: captured inputs, outcome and duration."""

    function_name: str
    execution_id: str
    args: list[Any] | None = None
    kwargs: dict[str, Any] | None = None
    result: Any = None
    duration_ms: float | None = None
    error_type: str | None = None
    error_message: str | None = None


def debug_wrapper(
    *,
    capture_result: bool = True,
    capture_args: bool = True,
    max_arg_length: int = 1000,
    log_level: str = "DEBUG",
    add_metadata: dict[str, Any] | None = None,
) -> Callable[[F], F]:
    """Decorator for function tracing.

    Args:
        capture_result: Whether to capture and log the return value
        capture_args: Whether to capture and log input arguments
        max_arg_length: Maximum length for serialized arguments
        log_level: Log level for the start and success records
        add_metadata: Extra fields for the start record

    Failures are always logged at ERROR with the traceback, then re-raised.

    Example:
        >>> @debug_wrapper(capture_result=True)
        ... def build_report(results_dir: str) -> QualityReport:
        ...     ...
    """
    level = getattr(logging, log_level.upper())

    def decorator(func: F) -> F:
        name = f"{func.__module__}.{func.__name__}"

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            trace = CallTrace(
                function_name=name,
                execution_id=f"{name}_{time.time_ns() // 1000}",
            )
            if capture_args:
                trace.args = [_serialize_value(arg, max_arg_length) for arg in args]
                trace.kwargs = {
                    k: _safe_serialize_kv(k, v, max_arg_length) for k, v in kwargs.items()
                }

            bind_contextvars(execution_id=trace.execution_id)
            logger.log(
                level,
                f"Executing function: {name}",
                execution_id=trace.execution_id,
                args=trace.args,
                kwargs=trace.kwargs,
                **(add_metadata or {}),
            )

            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                trace.duration_ms = (time.perf_counter() - start_time) * 1000
                trace.error_type = type(e).__name__
                trace.error_message = str(e)
                logger.error(
                    f"Error in function: {name}",
                    traceback=traceback.format_exc(),
                    **trace.model_dump(exclude={"function_name", "result"}),
                )
                raise
            else:
                trace.duration_ms = (time.perf_counter() - start_time) * 1000
                if capture_result:
                    trace.result = _redact_obj(_serialize_value(result, max_arg_length))
                logger.log(
                    level,
                    f"Successfully executed: {name}",
                    execution_id=trace.execution_id,
                    duration_ms=trace.duration_ms,
                    result=trace.result,
                )
                return result
            finally:
                unbind_contextvars("execution_id")

        return cast(F, wrapper)

    return decorator


def trace_entrypoint(func: F) -> F:
    """Full tracing for script entry points."""
    return debug_wrapper(capture_result=True, capture_args=True, log_level="INFO")(func)


def trace_performance(func: F) -> F:
    """Duration only; arguments and results are not captured."""
    return debug_wrapper(capture_result=False, capture_args=False, log_level="DEBUG")(func)

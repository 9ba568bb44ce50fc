"""Tracing helpers for content resolution (OpenTelemetry API only).

Spans go to whatever tracer provider the host process installed; without
one the API hands out non-recording spans and every helper is a no-op.
"""

import asyncio
import inspect
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from content.core.config import get_settings

# Call arguments recorded on spans, by parameter name. Content payloads
# (template data, preview objects) are never recorded.
_RECORDED_PARAMETERS = frozenset({
    "id", "entity_id", "content_id", "entity_class", "content_class",
    "locale", "stage", "dimension", "resource_key", "template_key", "index_name",
})


def _attribute_value(value: Any) -> str:
    if isinstance(value, type):
        return value.__name__
    return str(value)


def _record_arguments(
    span: trace.Span, signature: inspect.Signature | None, args: tuple, kwargs: dict
) -> None:
    """Set recorded parameters of the call as arg.<name> attributes."""
    if signature is None:
        return
    try:
        bound = signature.bind_partial(*args, **kwargs)
    except TypeError:
        return
    for name, value in bound.arguments.items():
        if name in _RECORDED_PARAMETERS and value is not None:
            span.set_attribute(f"arg.{name}", _attribute_value(value))


@contextmanager
def _span_outcome(span: trace.Span) -> Iterator[None]:
    """Mark the span OK, or ERROR with the exception recorded, and re-raise."""
    try:
        yield
    except Exception as e:
        span.set_status(Status(StatusCode.ERROR, str(e)))
        span.record_exception(e)
        raise
    span.set_status(Status(StatusCode.OK))


def traced(
    operation_name: str | None = None,
    attributes: dict[str, str | int | float | bool] | None = None,
) -> Callable:
    """Decorator to run a function (sync or async) in its own span.

    Spans are skipped entirely when settings.tracing_enabled is False.

    Args:
        operation_name: Span name (defaults to module.funcname).
        attributes: Static attributes set on every span.

    Returns:
        Decorated function.
    """

    def decorator(func: Callable) -> Callable:
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"
        try:
            signature: inspect.Signature | None = inspect.signature(func)
        except (TypeError, ValueError):
            signature = None

        def start_span():
            # Status and exception are set by _span_outcome.
            return tracer.start_as_current_span(
                span_name,
                attributes=attributes,
                record_exception=False,
                set_status_on_exception=False,
            )

        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            if not get_settings().tracing_enabled:
                return await func(*args, **kwargs)
            with start_span() as span:
                _record_arguments(span, signature, args, kwargs)
                with _span_outcome(span):
                    return await func(*args, **kwargs)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            if not get_settings().tracing_enabled:
                return func(*args, **kwargs)
            with start_span() as span:
                _record_arguments(span, signature, args, kwargs)
                with _span_outcome(span):
                    return func(*args, **kwargs)

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def _recording_span() -> trace.Span | None:
    span = trace.get_current_span()
    return span if span.is_recording() else None


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span."""
    span = _recording_span()
    if span is not None:
        span.set_attributes(attributes)


def add_span_event(
    name: str, attributes: dict[str, str | int | float | bool] | None = None
) -> None:
    """Add an event (e.g. a recoverable not-found) to the current span."""
    span = _recording_span()
    if span is not None:
        span.add_event(name, attributes=attributes or {})

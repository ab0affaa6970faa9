"""Tracing hooks and panic logging used while executing queries."""

from __future__ import annotations

import logging
import traceback
from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

from gqlcore.values import QueryError

TraceQueryFinish = Callable[[list[QueryError]], None]
TraceFieldFinish = Callable[[Optional[QueryError]], None]
TraceValidationFinish = TraceQueryFinish

_log = logging.getLogger("gqlcore")


@runtime_checkable
class Tracer(Protocol):
    """Receives notice of queries and fields as they are executed."""

    def trace_query(
        self,
        ctx: Any,
        query_string: str,
        operation_name: str,
        variables: Mapping[str, Any],
        var_types: Mapping[str, Any],
    ) -> tuple[Any, TraceQueryFinish]: ...

    def trace_field(
        self,
        ctx: Any,
        label: str,
        type_name: str,
        field_name: str,
        trivial: bool,
        args: Mapping[str, Any],
    ) -> tuple[Any, TraceFieldFinish]: ...


def _finish_untraced(errors: Any) -> None:
    """Finish a span that is not recorded; the outcome goes to the debug log only."""
    _log.debug("untraced step finished, errors: %s", errors)


class NoopTracer:
    """A tracer that records nothing."""

    def trace_query(self, ctx, query_string, operation_name, variables, var_types):
        return ctx, _finish_untraced

    def trace_field(self, ctx, label, type_name, field_name, trivial, args):
        return ctx, _finish_untraced


class NoopValidationTracer:
    """A validation tracer that records nothing."""

    def trace_validation(self) -> TraceValidationFinish:
        return _finish_untraced


class DefaultLogger:
    """Logs values raised inside resolvers, with the current stack."""

    def log_panic(self, ctx: Any, value: Any) -> None:
        stack = "".join(traceback.format_stack())
        _log.error("graphql: panic occurred: %s\n%s\ncontext: %s", value, stack, ctx)
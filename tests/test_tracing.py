import logging

from gqlcore.tracing import DefaultLogger, NoopTracer, NoopValidationTracer, Tracer
from gqlcore.values import QueryError


def test_noop_tracer_query_keeps_context():
    ctx = {"request": 1}
    new_ctx, finish = NoopTracer().trace_query(ctx, "{ a }", "", {}, {})
    assert new_ctx is ctx
    assert finish([QueryError("boom")]) is None


def test_noop_tracer_field_keeps_context():
    ctx = object()
    new_ctx, finish = NoopTracer().trace_field(ctx, "Query.a", "Query", "a", False, {"x": 1})
    assert new_ctx is ctx
    assert finish(None) is None
    assert finish(QueryError("bad")) is None


def test_noop_tracer_used_through_tracer_interface():
    tracer: Tracer = NoopTracer()
    query_ctx, finish_query = tracer.trace_query("ctx", "{ a }", "Op", {"v": 1}, {})
    field_ctx, finish_field = tracer.trace_field(query_ctx, "Query.a", "Query", "a", True, {})
    assert (query_ctx, field_ctx) == ("ctx", "ctx")
    assert finish_query([]) is None
    assert finish_field(None) is None


def test_noop_validation_tracer():
    finish = NoopValidationTracer().trace_validation()
    assert finish([]) is None
    assert finish([QueryError("x")]) is None


def test_default_logger_logs_value_and_context(caplog):
    with caplog.at_level(logging.ERROR, logger="gqlcore"):
        DefaultLogger().log_panic("ctx-value", "boom")
    assert len(caplog.records) == 1
    message = caplog.records[0].getMessage()
    assert message.startswith("graphql: panic occurred: boom\n")
    assert message.endswith("\ncontext: ctx-value")
    assert "test_default_logger_logs_value_and_context" in message
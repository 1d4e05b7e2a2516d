"""Unit tests for correlation context."""

from __future__ import annotations

from notify_relay.observability.correlation import CorrelationContext, RequestContext


class TestCorrelationContext:
    def teardown_method(self) -> None:
        CorrelationContext.clear()

    def test_set_get_clear(self) -> None:
        ctx = RequestContext(correlation_id="abc")
        CorrelationContext.set(ctx)
        assert CorrelationContext.get() is ctx
        CorrelationContext.clear()
        assert CorrelationContext.get() is None

    def test_generated_ids_are_unique_uuids(self) -> None:
        a = CorrelationContext.set_from_headers({})
        b = CorrelationContext.set_from_headers({})
        assert a.correlation_id != b.correlation_id
        assert len(a.correlation_id) == 36

    def test_headers_prefer_correlation_id(self) -> None:
        ctx = CorrelationContext.set_from_headers(
            {"X-Correlation-ID": "corr", "X-Request-ID": "req"}
        )
        assert ctx.correlation_id == "corr"
        assert CorrelationContext.get() is ctx

    def test_headers_fall_back_to_request_id(self) -> None:
        assert CorrelationContext.set_from_headers({"x-request-id": "req"}).correlation_id == "req"

    def test_traceparent_parsed(self) -> None:
        ctx = CorrelationContext.set_from_headers(
            {"traceparent": "00-4bf92f3577b34da6a3ce929d0e0e4736-00f067aa0ba902b7-01"}
        )
        assert ctx.trace_id == "4bf92f3577b34da6a3ce929d0e0e4736"
        assert ctx.correlation_id == "4bf92f3577b34da6a3ce929d0e0e4736"

    def test_generated_when_no_headers(self) -> None:
        ctx = CorrelationContext.set_from_headers({})
        assert ctx.correlation_id
        assert ctx.trace_id is None

"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from opentelemetry import trace

from vault_mcp.utils.telemetry import (
    _INSTRUMENTATION_NAME,
    ATTR_RPC_ERROR_CODE,
    ATTR_RPC_ID,
    ATTR_RPC_METHOD,
    ATTR_TOOL_IS_ERROR,
    ATTR_TOOL_NAME,
    ATTR_VAULT_FILENAME,
    configure_telemetry,
    get_tracer,
)


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        tracer = get_tracer("test.module")
        assert isinstance(tracer, trace.Tracer)

    def test_default_name(self) -> None:
        tracer = get_tracer()
        assert isinstance(tracer, trace.Tracer)

    def test_noop_span(self) -> None:
        """Without SDK configured, spans should be no-ops."""
        tracer = get_tracer("test.noop")
        with tracer.start_as_current_span("vault.save") as span:
            span.set_attribute(ATTR_VAULT_FILENAME, "note")


class TestConfigureTelemetry:
    def test_raises_without_sdk(self) -> None:
        with patch.dict("sys.modules", {"opentelemetry.sdk.resources": None}):
            with pytest.raises(ImportError, match="opentelemetry-sdk"):
                configure_telemetry()

    def test_configures_with_console(self) -> None:
        try:
            from opentelemetry.sdk.trace import TracerProvider
        except ImportError:
            pytest.skip("opentelemetry-sdk not installed")

        with patch("vault_mcp.utils.telemetry.trace.set_tracer_provider") as set_provider:
            provider = configure_telemetry(service_name="test-svc")

        try:
            assert isinstance(provider, TracerProvider)
            assert provider.resource.attributes["service.name"] == "test-svc"
            set_provider.assert_called_once_with(provider)
        finally:
            provider.shutdown()

    def test_otlp_raises_without_exporter(self) -> None:
        try:
            import opentelemetry.sdk.trace  # noqa: F401
        except ImportError:
            pytest.skip("opentelemetry-sdk not installed")

        with patch.dict(
            "sys.modules",
            {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": None},
        ):
            with patch("vault_mcp.utils.telemetry.trace.set_tracer_provider"):
                with pytest.raises(ImportError, match="opentelemetry-exporter-otlp"):
                    configure_telemetry(otlp_endpoint="http://localhost:4317")


class TestAttributeConstants:
    @pytest.mark.parametrize(
        "key",
        [
            ATTR_RPC_METHOD,
            ATTR_RPC_ID,
            ATTR_RPC_ERROR_CODE,
            ATTR_TOOL_NAME,
            ATTR_TOOL_IS_ERROR,
            ATTR_VAULT_FILENAME,
        ],
    )
    def test_constants_are_namespaced(self, key: str) -> None:
        assert key.startswith("vault_mcp.")

    def test_instrumentation_name(self) -> None:
        assert _INSTRUMENTATION_NAME == "vault_mcp"

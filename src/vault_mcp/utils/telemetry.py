"""Tracing for vault-mcp on top of the OpenTelemetry API.

Modules take a tracer at import time::

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("vault.save") as span:
        span.set_attribute(ATTR_VAULT_FILENAME, filename)

Until :func:`configure_telemetry` installs an SDK provider, those spans are
no-ops.  The SDK and exporters come from the ``otel`` extra.  Console spans
are written to stderr; stdout is reserved for protocol traffic.
"""

from __future__ import annotations

import sys
from typing import Any

from opentelemetry import trace

ATTR_RPC_METHOD = "vault_mcp.rpc.method"
ATTR_RPC_ID = "vault_mcp.rpc.id"
ATTR_RPC_ERROR_CODE = "vault_mcp.rpc.error_code"
ATTR_TOOL_NAME = "vault_mcp.tool.name"
ATTR_TOOL_IS_ERROR = "vault_mcp.tool.is_error"
ATTR_VAULT_FILENAME = "vault_mcp.vault.filename"

_INSTRUMENTATION_NAME = "vault_mcp"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Tracer for *name*; a proxy that starts recording once a provider is set."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(service_name: str = "vault-mcp", otlp_endpoint: str | None = None) -> Any:
    """Install a global ``TracerProvider`` and return it.

    Spans are exported over OTLP/gRPC when *otlp_endpoint* is given and
    printed as JSON on stderr otherwise.  Call ``shutdown()`` on the returned
    provider to flush.

    Raises:
        ImportError: ``opentelemetry-sdk`` (or the OTLP exporter) is missing.
    """
    try:
        from opentelemetry.sdk.resources import SERVICE_NAME, Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = "Telemetry needs opentelemetry-sdk; install it with: pip install vault-mcp[otel]"
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
    provider.add_span_processor(_span_processor(otlp_endpoint))
    trace.set_tracer_provider(provider)
    return provider


def _span_processor(otlp_endpoint: str | None) -> Any:
    from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SimpleSpanProcessor,
    )

    if not otlp_endpoint:
        return SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr))

    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
            OTLPSpanExporter,
        )
    except ImportError as exc:
        msg = "OTLP export needs opentelemetry-exporter-otlp; install it with: pip install vault-mcp[otel]"
        raise ImportError(msg) from exc
    return BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint))

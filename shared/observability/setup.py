import logging
import structlog
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

# OpenTelemetry
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from shared.config import settings

# 1. Structlog Processor: Injects Trace/Span IDs into every log line
def add_otel_ids(logger, log_method, event_dict):
    span = trace.get_current_span()
    if span.is_recording():
        ctx = span.get_span_context()
        event_dict["trace_id"] = trace.format_trace_id(ctx.trace_id)
        event_dict["span_id"] = trace.format_span_id(ctx.span_id)
    return event_dict

def resolve_log_level(name: str) -> int:
    # getLevelName maps unknown names to a "Level X" string
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO

# 2. Configure Structlog for JSON output
def configure_logging(level: str = settings.LOG_LEVEL):
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_otel_ids,
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            resolve_log_level(level)
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

# 3. Configure OpenTelemetry Tracing (only when a collector endpoint is set)
def configure_tracing(app: FastAPI, service_name: str, otlp_endpoint: str | None):
    if not otlp_endpoint:
        return False

    resource = Resource.create({SERVICE_NAME: service_name})
    provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(provider)

    exporter = OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True)
    provider.add_span_processor(BatchSpanProcessor(exporter))

    # Creates spans for every incoming request, mounted sub-apps included
    FastAPIInstrumentor.instrument_app(app)
    return True

# 4. Configure Prometheus Metrics
def configure_metrics(app: FastAPI):
    # HTTP latency / status code metrics, exposed at /metrics
    Instrumentator().instrument(app).expose(app)

# --- THE MASTER SETUP FUNCTION ---
def setup_observability(app: FastAPI, service_name: str):
    """
    Bootstraps Logging, Tracing, and Metrics for a FastAPI app.
    Call this once per process, on the outermost app: the Prometheus
    collectors live in the global registry and cannot be registered twice.
    """
    configure_logging()
    tracing = configure_tracing(app, service_name, settings.OTLP_ENDPOINT)
    if settings.METRICS_ENABLED:
        configure_metrics(app)

    structlog.get_logger(__name__).info(
        "observability_configured",
        service=service_name,
        tracing=tracing,
        metrics=settings.METRICS_ENABLED,
    )

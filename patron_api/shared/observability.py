# patron_api/shared/observability.py
import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from patron_api import __version__
from patron_api.shared.config import Settings

logger = logging.getLogger(__name__)

def setup_telemetry(settings: Settings) -> bool:
    """
    Initializes the OpenTelemetry SDK with OTLP export.
    Should be called once at process startup.

    Returns:
        True if a tracer provider was installed, False when telemetry is disabled.
    """
    if not settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.info("Telemetry disabled: No OTEL_EXPORTER_OTLP_ENDPOINT configured.")
        return False

    logger.info(f"Initializing Telemetry for service: {settings.OTEL_SERVICE_NAME}")

    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "deployment.environment": settings.APP_ENV.value,
        "service.version": __version__,
    })

    trace_provider = TracerProvider(resource=resource)

    endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT.rstrip("/")
    trace_provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces"))
    )

    if settings.DEBUG:
        trace_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(trace_provider)
    return True

def instrument_fastapi(app: FastAPI, settings: Settings) -> None:
    """
    Auto-instruments the FastAPI application to trace incoming HTTP requests.
    """
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        FastAPIInstrumentor.instrument_app(app)

def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in Use Cases.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("use_case.my_logic"):
            ...
    """
    return trace.get_tracer(name)

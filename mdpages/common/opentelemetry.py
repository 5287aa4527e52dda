import logging
from fastapi import FastAPI
from opentelemetry.sdk.resources import Resource, SERVICE_NAME, SERVICE_VERSION
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.aiohttp_client import AioHttpClientInstrumentor  # type: ignore
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor  # type: ignore

from mdpages.config import Settings

logger = logging.getLogger(__name__)


def create_tracer_provider(settings: Settings) -> TracerProvider:
    resource = Resource.create(
        {
            SERVICE_NAME: settings.OTEL_SERVICE_NAME,
            SERVICE_VERSION: settings.MDPAGES_VERSION,
        }
    )
    tracer_provider = TracerProvider(resource=resource)
    tracer_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter()))
    return tracer_provider


def instrument_app(app: FastAPI, settings: Settings) -> TracerProvider:
    """Trace inbound requests and the outbound store and raw-file calls.

    The provider is passed to both instrumentors instead of being installed
    globally; the caller shuts it down to flush pending spans.
    """
    tracer_provider = create_tracer_provider(settings)

    FastAPIInstrumentor.instrument_app(  # type: ignore
        app,
        tracer_provider=tracer_provider,
        excluded_urls=settings.OTEL_EXCLUDED_URLS,
    )
    AioHttpClientInstrumentor().instrument(tracer_provider=tracer_provider)

    logger.info(
        f"Tracing enabled for '{settings.OTEL_SERVICE_NAME}' "
        f"(excluded urls: {settings.OTEL_EXCLUDED_URLS or 'none'})"
    )
    return tracer_provider

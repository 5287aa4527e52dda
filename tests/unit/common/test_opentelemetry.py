from fastapi import FastAPI
from pytest_mock import MockerFixture
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION
from opentelemetry.sdk.trace import TracerProvider

from mdpages.common.opentelemetry import create_tracer_provider, instrument_app
from mdpages.config import Settings


def otel_settings() -> Settings:
    return Settings(
        _env_file=None,  # type: ignore
        OTEL_ENABLED=True,
        OTEL_SERVICE_NAME="mdpages-test",
        MDPAGES_VERSION="v9.9.9",
    )


def test_create_tracer_provider_sets_resource(mocker: MockerFixture) -> None:
    mocker.patch("mdpages.common.opentelemetry.OTLPSpanExporter")

    tracer_provider = create_tracer_provider(otel_settings())

    attributes = tracer_provider.resource.attributes
    assert attributes[SERVICE_NAME] == "mdpages-test"
    assert attributes[SERVICE_VERSION] == "v9.9.9"
    tracer_provider.shutdown()


def test_instrument_app_passes_provider_to_instrumentors(
    mocker: MockerFixture,
) -> None:
    mocker.patch("mdpages.common.opentelemetry.OTLPSpanExporter")
    mock_fastapi = mocker.patch("mdpages.common.opentelemetry.FastAPIInstrumentor")
    mock_aiohttp = mocker.patch(
        "mdpages.common.opentelemetry.AioHttpClientInstrumentor"
    )
    app = FastAPI()

    tracer_provider = instrument_app(app, otel_settings())

    assert isinstance(tracer_provider, TracerProvider)
    mock_fastapi.instrument_app.assert_called_once_with(
        app, tracer_provider=tracer_provider, excluded_urls="healthcheck"
    )
    mock_aiohttp.return_value.instrument.assert_called_once_with(
        tracer_provider=tracer_provider
    )
    tracer_provider.shutdown()

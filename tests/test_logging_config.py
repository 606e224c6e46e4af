import pytest
import structlog

from intents_guide.observability.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def test_production_renders_json():
    setup_logging(env="production", level="debug")
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)


def test_development_renders_console():
    setup_logging(env="development", level="not-a-level")
    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)

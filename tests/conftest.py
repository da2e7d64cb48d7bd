"""Pytest configuration and fixtures."""

import pytest
import structlog

from orderflow.config import reset_settings
from orderflow.steps import OrderSteps, StepsConfig
from orderflow.variants import build, names


@pytest.fixture(autouse=True)
def _clean_state(monkeypatch):
    """Isolate settings and logging configuration per test."""
    for key in (
        "ORDERFLOW_ORDER_ID",
        "ORDERFLOW_VARIANT",
        "ORDERFLOW_STEP_LATENCY",
        "ORDERFLOW_LOG_LEVEL",
        "ORDERFLOW_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def make_steps():
    """Build OrderSteps with zero latency and the given fault switches."""

    def _make(**overrides) -> OrderSteps:
        return OrderSteps(StepsConfig(latency=0, **overrides))

    return _make


@pytest.fixture
def steps(make_steps):
    return make_steps()


@pytest.fixture(params=names())
def variant(request):
    return request.param


@pytest.fixture
def make_pipeline(variant):
    def _make(steps: OrderSteps):
        return build(variant, steps)

    return _make

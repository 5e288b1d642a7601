from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from sip_projection.app import create_app
from sip_projection.config import TestingConfig
from sip_projection.models import PlanConfiguration


@pytest.fixture()
def app():
    return create_app(TestingConfig)


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def make_payload():
    """Factory for the default calculator inputs: 5000 a month at 12% for 10 years."""

    def _make(**overrides) -> dict:
        payload = {
            "initialInvestment": 0,
            "monthlyContribution": 5000,
            "investmentPeriodYears": 10,
            "baseAnnualReturnPercent": 12,
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture()
def make_plan(make_payload):
    def _make(**overrides) -> PlanConfiguration:
        return PlanConfiguration.model_validate(make_payload(**overrides))

    return _make

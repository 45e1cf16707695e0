"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from loan_gateway.api.main import create_app
from loan_gateway.api.dependencies import get_today


# Evaluation date pinned so age checks don't drift with the calendar
EVALUATION_DATE = date(2025, 1, 15)

# Reference personal codes (valid checksums)
DEBTOR_CODE = "37605030299"  # born 1976-05-03, selector 0299
SEGMENT_1_CODE = "50307172740"  # born 2003-07-17, selector 2740
SEGMENT_2_CODE = "38411266610"  # born 1984-11-26, selector 6610
SEGMENT_3_CODE = "35006069515"  # born 1950-06-06, selector 9515
UNDERAGE_CODE = "60806012758"  # born 2008-06-01, selector 2758
EIGHTEEN_TODAY_CODE = "50701152752"  # born 2007-01-15, selector 2752
INVALID_CODE = "12345678901"


@pytest.fixture
def today() -> date:
    return EVALUATION_DATE


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a pinned evaluation date"""
    app = create_app()
    app.dependency_overrides[get_today] = lambda: EVALUATION_DATE
    return TestClient(app)

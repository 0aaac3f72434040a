"""
Pytest fixtures for the calculator tests.
"""
import pytest

from nasal_bone import create_app
from nasal_bone.services.evaluator_service import RawInput


@pytest.fixture
def app():
    """Flask app with the testing configuration."""
    app = create_app('testing')
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Flask CLI runner."""
    return app.test_cli_runner()


@pytest.fixture
def valid_input():
    """GA 21+3, LHN 4.50, LPN 4.00, DBP 50.00."""
    return RawInput(
        gestational_weeks='21',
        gestational_days='3',
        nasal_bone_length='4.50',
        prenasal_length='4.00',
        biparietal_diameter='50.00',
    )


@pytest.fixture
def valid_payload():
    """Same measurements as valid_input, using the form field names."""
    return {
        'gaWeeks': '21',
        'gaDays': '3',
        'lhn': '4.50',
        'lpn': '4.00',
        'dbp': '50.00',
    }

"""
Pytest configuration and fixtures
"""
import pytest
import sys
import os

# Add the project root to the path so we can import app, core and config
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def client():
    """Flask test client for the calculator app."""
    from app import app

    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def metric_profile():
    """Male, 25 years, 70kg, 175cm, sedentary."""
    return {
        'unit': 'metric',
        'weight': '70',
        'height': '175',
        'age': '25',
        'gender': 'male',
        'activity_level': 'sedentary',
        'goal': 'maintain',
    }

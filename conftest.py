"""
Shared pytest fixtures for DeskCalc
"""
import pytest

from api import create_app
from calculator import CalculationEngine
from dispatcher import ActionDispatcher


@pytest.fixture
def engine():
    return CalculationEngine()


@pytest.fixture
def dispatcher(engine):
    return ActionDispatcher(engine)


@pytest.fixture
def app(dispatcher):
    app = create_app(dispatcher)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()

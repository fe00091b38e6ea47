import pytest
from bs4 import BeautifulSoup

from app import create_app


@pytest.fixture
def app():
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def page(client):
    """Parsed portfolio page"""
    response = client.get('/')
    assert response.status_code == 200
    return BeautifulSoup(response.get_data(as_text=True), 'html.parser')

import pytest
from app import create_app


@pytest.fixture
def client():
    # Configure app for testing
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'dev-key-for-testing'
    })

    with app.test_client() as client:
        yield client


def test_homepage_loads(client):
    """Test that the designer page loads successfully."""
    rv = client.get('/')
    assert rv.status_code == 200
    assert b'DOCTYPE html' in rv.data
    # Seed box renders the default crops
    assert 'قمح'.encode('utf-8') in rv.data


def test_static_assets(client):
    """Test that static assets like CSS are accessible."""
    rv = client.get('/static/style.css')
    assert rv.status_code == 200
    rv.close()


def test_state_endpoint(client):
    """Test that the JSON state endpoint answers with the default 10x10 grid."""
    rv = client.get('/api/designer/state')
    assert rv.status_code == 200
    data = rv.get_json()
    assert data['success'] is True
    assert data['config']['rows'] == 10
    assert data['config']['cols'] == 10
    assert data['cells'] == []


def test_designer_script_renders_crop_text_safely(client):
    """Test that crop names and icons are written as text, not markup."""
    rv = client.get('/static/designer.js')
    assert rv.status_code == 200
    script = rv.get_data(as_text=True)
    rv.close()
    assert '${crop.name}' not in script
    assert '${crop.icon}' not in script
    assert "span('name', crop.name)" in script

"""
PyTest configuration for the clan site backend.
Each test gets a fresh app with an in-memory SQLite database and its own
upload directory.
"""
import io
import pytest
from clansite import create_app
from clansite.extensions import db

ADMIN_USERNAME = 'admin'
ADMIN_PASSWORD = 'admin123'


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / 'uploads'


@pytest.fixture
def app_config(upload_dir):
    """Overrides applied on top of TestingConfig."""
    return {
        'UPLOAD_FOLDER': str(upload_dir),
        'ADMIN_USERNAME': ADMIN_USERNAME,
        'ADMIN_PASSWORD': ADMIN_PASSWORD,
    }


@pytest.fixture
def app(app_config):
    app = create_app('testing', app_config)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Anonymous visitor."""
    return app.test_client()


def login(test_client, username=ADMIN_USERNAME, password=ADMIN_PASSWORD):
    return test_client.post('/admin/login', json={'username': username, 'password': password})


@pytest.fixture
def admin_client(app):
    """Browser holding an authenticated admin session."""
    test_client = app.test_client()
    response = login(test_client)
    assert response.get_json() == {'success': True}
    return test_client


@pytest.fixture
def open_quiz(admin_client):
    response = admin_client.post('/admin/set-quiz-status', json={'isOpen': True})
    assert response.get_json()['isOpen'] is True
    return admin_client


@pytest.fixture
def make_upload():
    """Build a multipart file tuple for the test client."""
    def _make(content=b'%PDF-1.4 result', filename='result.pdf'):
        return (io.BytesIO(content), filename)
    return _make

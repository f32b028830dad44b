"""
Fixtures for the edu_admin test suite
Applications are built with TestingConfig; uploads go to a per-test temp dir
"""
import io

import pytest

from config import TestingConfig
from edu_admin import create_app, db
from edu_admin.storage import get_storage


def make_app(tmp_path, backend='memory', **overrides):
    """Create an application for one storage backend"""
    attrs = {
        'STORAGE_BACKEND': backend,
        'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
    }
    attrs.update(overrides)
    config_class = type('PerTestConfig', (TestingConfig,), attrs)
    return create_app(config_class)


def teardown_app(app):
    if app.config['STORAGE_BACKEND'] == 'sql':
        with app.app_context():
            db.session.remove()
            db.drop_all()


@pytest.fixture
def app(tmp_path):
    """Application backed by the in-memory store"""
    app = make_app(tmp_path)
    yield app
    teardown_app(app)


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture(params=['memory', 'sql'])
def backend_app(request, tmp_path):
    """Application for each storage backend"""
    app = make_app(tmp_path, backend=request.param)
    yield app
    teardown_app(app)


@pytest.fixture
def backend_client(backend_app):
    return backend_app.test_client()


@pytest.fixture
def storage(backend_app):
    """Storage of each backend inside an application context"""
    with backend_app.app_context():
        yield get_storage()


@pytest.fixture
def upload_dir(app):
    return app.config['UPLOAD_FOLDER']


@pytest.fixture
def make_file():
    """Factory of multipart file tuples accepted by the Flask test client"""
    def _make_file(name='paper.pdf', size=256, mime_type='application/pdf'):
        return (io.BytesIO(b'%PDF-1.4\n' + b'0' * size), name, mime_type)
    return _make_file

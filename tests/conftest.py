import pytest

from member_directory import create_app
from member_directory.config import TestConfig
from member_directory.extensions import db
from member_directory.services import register_admin


@pytest.fixture()
def app(tmp_path):
    class _Config(TestConfig):
        UPLOAD_FOLDER = str(tmp_path / 'uploads')

    app = create_app(_Config)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def app_context(app):
    # Service-level tests only; route tests leave the context to each request
    with app.app_context():
        yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin(app):
    with app.app_context():
        return register_admin('admin', 'secret').username


@pytest.fixture()
def logged_in(client, admin):
    r = client.post('/login', data={'username': admin, 'password': 'secret'})
    assert r.status_code == 302
    return client

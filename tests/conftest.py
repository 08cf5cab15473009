import pytest

from cookie_shop import create_app
from cookie_shop.config import TestConfig
from cookie_shop.extensions import db
from cookie_shop.auth.tokens import issue_access_token, issue_refresh_token

ADMIN_PHONE = "09337932893"
ADMIN_PASSWORD = "amir1382"


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_token(app):
    with app.app_context():
        return issue_access_token(1, True)


@pytest.fixture()
def user_token(app):
    with app.app_context():
        return issue_access_token(2, False)


@pytest.fixture()
def admin_refresh_token(app):
    with app.app_context():
        return issue_refresh_token(1, True)


def bearer(token):
    return {"Authorization": f"Bearer {token}"}

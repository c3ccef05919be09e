import pytest
from werkzeug.security import generate_password_hash

from farmacrm import create_app
from tests.fakes import FakeConn


COMERCIAL = {
    "Id": 7,
    "Nombre": "Ana Ruiz",
    "Email": "ana@farmadescanso.test",
    "Password": generate_password_hash("secreta"),
    "Roll": "Comercial",
}


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "WTF_CSRF_ENABLED": False,
        "N8N_WEBHOOK_URL": "http://n8n.test/webhook/holded",
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_db(monkeypatch):
    """Conexión falsa compartida por auth y dashboard; añadir reglas a .script."""
    conn = FakeConn({
        "FROM comerciales WHERE Id": [COMERCIAL],
        "FROM comerciales WHERE Email": [COMERCIAL],
    })
    monkeypatch.setattr("farmacrm.auth.get_conn", lambda: conn)
    monkeypatch.setattr("farmacrm.routes.dashboard.get_conn", lambda: conn)
    return conn


@pytest.fixture
def logged_client(client, fake_db):
    with client.session_transaction() as sess:
        sess["_user_id"] = str(COMERCIAL["Id"])
        sess["_fresh"] = True
    return client

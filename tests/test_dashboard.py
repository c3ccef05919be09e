from datetime import date
from decimal import Decimal

import pytest
import requests

from mysql.connector import errors

from farmacrm import create_app
from tests.conftest import COMERCIAL

PEDIDO = {
    "Id": 250,
    "NumPedido": "P250001",
    "Id_Cliente": 762,
    "FechaPedido": date(2025, 3, 14),
    "EstadoPedido": "Pendiente",
    "cliente_nombre": "Farmacia Centro",
}
LINEAS = [
    {"Id_Articulo": 20, "Cantidad": Decimal("3"), "SKU": "220377", "Nombre": "Crema", "PVL": Decimal("9.90")},
]


class FakeResponse:
    def __init__(self, status_code=200, text="ok"):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400


@pytest.fixture
def pedido_db(fake_db):
    fake_db.script[:0] = [
        ("FROM pedidos p", [PEDIDO]),
        ("FROM pedidos_articulos pa", LINEAS),
        ("UPDATE pedidos SET EstadoPedido", 1),
    ]
    return fake_db


@pytest.fixture
def webhook_calls(monkeypatch):
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append((url, json))
        return FakeResponse(200)

    monkeypatch.setattr("farmacrm.services.pedidos.requests.post", fake_post)
    return calls


def test_asignaciones_requires_login(client):
    r = client.get("/dashboard/ajustes/asignaciones-comerciales")
    assert r.status_code == 302
    assert "/login" in r.headers["Location"]


def test_asignaciones_lists_comerciales(logged_client, fake_db):
    fake_db.script.append(("FROM comerciales cial", [
        {"Id": 7, "Nombre": "Ana Ruiz", "Email": "ana@farmadescanso.test", "num_clientes": 12},
    ]))
    r = logged_client.get("/dashboard/ajustes/asignaciones-comerciales")
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert "Ana Ruiz" in html
    assert 'id="goToTop"' in html


def test_login_with_valid_password(client, fake_db):
    r = client.post("/login", data={"email": COMERCIAL["Email"], "password": "secreta"})
    assert r.status_code == 302
    assert r.headers["Location"].endswith("/dashboard/ajustes/asignaciones-comerciales")


def test_login_rejects_wrong_password(client, fake_db):
    r = client.post("/login", data={"email": COMERCIAL["Email"], "password": "otra"})
    assert r.status_code == 200
    assert "incorrectos" in r.get_data(as_text=True)


def test_login_ignores_external_next(client, fake_db):
    r = client.post("/login?next=//evil.example/x",
                    data={"email": COMERCIAL["Email"], "password": "secreta"})
    assert r.status_code == 302
    assert "evil.example" not in r.headers["Location"]


def test_cliente_detalle_shows_okko_status(logged_client, fake_db):
    fake_db.script.insert(0, ("FROM clientes WHERE Id", [
        {"Id": 762, "Nombre_Razon_Social": "Farmacia Centro", "OK_KO": "KO",
         "Telefono": None, "Email": None},
    ]))
    r = logged_client.get("/dashboard/clientes/762")
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert "Farmacia Centro" in html
    assert "Inactivo" in html


def test_cliente_detalle_404(logged_client, fake_db):
    r = logged_client.get("/dashboard/clientes/999")
    assert r.status_code == 404


def test_pedido_detalle_embeds_holded_payload(logged_client, pedido_db):
    r = logged_client.get("/dashboard/pedidos/250")
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert 'id="holdedButton"' in html
    assert "&#34;pedidoId&#34;: 250" in html
    assert "pedido-holded.js" in html


def test_holded_pushes_to_webhook_and_closes_pedido(logged_client, pedido_db, webhook_calls):
    r = logged_client.post("/dashboard/pedidos/250/holded", json={"pedidoId": 250})

    assert r.status_code == 200
    assert r.get_json() == {"success": True}
    url, payload = webhook_calls[0]
    assert url == "http://n8n.test/webhook/holded"
    assert payload["pedidoId"] == 250
    assert payload["numPedido"] == "P250001"
    assert payload["lineas"][0]["cantidad"] == 3.0
    assert pedido_db.statements("UPDATE pedidos SET EstadoPedido")
    assert pedido_db.commits == 1


def test_holded_webhook_failure_keeps_pedido_open(logged_client, pedido_db, monkeypatch):
    monkeypatch.setattr("farmacrm.services.pedidos.requests.post",
                        lambda url, json=None, timeout=None: FakeResponse(500, "boom"))
    r = logged_client.post("/dashboard/pedidos/250/holded", json={"pedidoId": 250})

    assert r.status_code == 502
    body = r.get_json()
    assert body["success"] is False
    assert "500" in body["error"]
    assert not pedido_db.statements("UPDATE pedidos SET EstadoPedido")


def test_holded_webhook_unreachable(logged_client, pedido_db, monkeypatch):
    def boom(url, json=None, timeout=None):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr("farmacrm.services.pedidos.requests.post", boom)
    r = logged_client.post("/dashboard/pedidos/250/holded", json={"pedidoId": 250})
    assert r.status_code == 502
    assert r.get_json()["success"] is False


def test_holded_unknown_pedido(logged_client, fake_db, webhook_calls):
    r = logged_client.post("/dashboard/pedidos/999/holded", json={"pedidoId": 999})
    assert r.status_code == 404
    assert r.get_json()["success"] is False
    assert webhook_calls == []


def test_holded_requires_json(logged_client, pedido_db, webhook_calls):
    r = logged_client.post("/dashboard/pedidos/250/holded", data="pedidoId=250")
    assert r.status_code == 400
    assert webhook_calls == []


def test_holded_without_webhook_configured(app, logged_client, pedido_db, webhook_calls):
    app.config["N8N_WEBHOOK_URL"] = ""
    r = logged_client.post("/dashboard/pedidos/250/holded", json={"pedidoId": 250})
    assert r.status_code == 503
    assert webhook_calls == []


def test_holded_requires_login(client, webhook_calls):
    r = client.post("/dashboard/pedidos/250/holded", json={"pedidoId": 250})
    assert r.status_code == 302
    assert webhook_calls == []


def test_holded_close_failure_answers_json(logged_client, pedido_db, webhook_calls):
    pedido_db.script[:0] = [
        ("UPDATE pedidos SET EstadoPedido", errors.OperationalError(msg="Lost connection to MySQL server", errno=2013)),
    ]
    r = logged_client.post("/dashboard/pedidos/250/holded", json={"pedidoId": 250})

    assert r.status_code == 500
    assert r.is_json
    assert r.get_json()["success"] is False
    assert len(webhook_calls) == 1
    assert pedido_db.commits == 0


def test_holded_is_csrf_exempt(fake_db):
    app = create_app({"TESTING": True, "WTF_CSRF_ENABLED": True, "N8N_WEBHOOK_URL": ""})
    client = app.test_client()
    with client.session_transaction() as sess:
        sess["_user_id"] = str(COMERCIAL["Id"])
        sess["_fresh"] = True

    # un formulario normal sin token sigue rechazándose
    assert client.post("/logout").status_code == 400

    r = client.post("/dashboard/pedidos/250/holded", json={"pedidoId": 250})
    assert r.status_code == 503
    assert r.get_json()["success"] is False


def test_pedido_detalle_without_num_pedido(logged_client, fake_db):
    fake_db.script[:0] = [
        ("FROM pedidos p", [dict(PEDIDO, NumPedido=None)]),
        ("FROM pedidos_articulos pa", []),
    ]
    r = logged_client.get("/dashboard/pedidos/250")
    html = r.get_data(as_text=True)
    assert r.status_code == 200
    assert "<h1>Pedido 250</h1>" in html
    assert "Pedido None" not in html

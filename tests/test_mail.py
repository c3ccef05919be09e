import smtplib
import ssl

import pytest

from farmacrm.mail import MailTransport


class FakeSMTP:
    instances = []

    def __init__(self, host, port, timeout=None, context=None):
        self.host, self.port, self.context = host, port, context
        self.logged_in = None
        self.sent = []
        self.quit_called = False
        self.closed = False
        FakeSMTP.instances.append(self)

    def login(self, user, password):
        if password == "mala":
            raise smtplib.SMTPAuthenticationError(535, b"Authentication failed")
        self.logged_in = (user, password)

    def close(self):
        self.closed = True

    def send_message(self, msg):
        self.sent.append(msg)
        return {}

    def quit(self):
        self.quit_called = True


@pytest.fixture
def smtp(monkeypatch):
    FakeSMTP.instances = []
    monkeypatch.setattr("farmacrm.mail.smtplib.SMTP_SSL", FakeSMTP)
    return FakeSMTP


@pytest.fixture
def transport():
    return MailTransport("mail.test", "465", "pedidos@farmadescanso.test", "clave")


def test_verify_logs_in_and_quits(smtp, transport):
    transport.verify()
    server = smtp.instances[0]
    assert (server.host, server.port) == ("mail.test", 465)
    assert server.logged_in == ("pedidos@farmadescanso.test", "clave")
    assert server.quit_called
    assert server.context.verify_mode == ssl.CERT_NONE


def test_send_html(smtp, transport):
    message_id, refused = transport.send_html("destino@example.com", "Prueba", "<h1>Hola</h1>")

    msg = smtp.instances[0].sent[0]
    assert msg["To"] == "destino@example.com"
    assert msg["From"] == "pedidos@farmadescanso.test"
    assert msg["Subject"] == "Prueba"
    assert message_id == msg["Message-ID"]
    assert refused == {}
    html = msg.get_body(preferencelist=("html",)).get_content()
    assert "<h1>Hola</h1>" in html
    assert smtp.instances[0].quit_called


def test_describe_masks_password(transport):
    info = transport.describe()
    assert info["Pass"] == "***"
    assert "clave" not in info.values()


def test_from_config():
    class Cfg:
        MAIL_HOST = "smtp.test"
        MAIL_PORT = 465
        MAIL_USER = "u@test"
        MAIL_PASS = ""

    t = MailTransport.from_config(Cfg)
    assert (t.host, t.port, t.user) == ("smtp.test", 465, "u@test")
    assert t.describe()["Pass"] == "(vacía)"


def test_failed_login_closes_socket(smtp):
    transport = MailTransport("mail.test", 465, "pedidos@farmadescanso.test", "mala")
    with pytest.raises(smtplib.SMTPAuthenticationError):
        transport.verify()
    server = smtp.instances[0]
    assert server.closed
    assert not server.quit_called

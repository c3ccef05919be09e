import smtplib
import ssl
from email.message import EmailMessage
from email.utils import make_msgid
from .config import Config

SMTP_TIMEOUT = 30

class MailTransport:
    """
    Transporte SMTP con SSL implícito (puerto 465).
    El servidor de correo usa un certificado que no valida, así que la
    verificación de certificado queda desactivada.
    """

    def __init__(self, host, port, user, password):
        self.host = host
        self.port = int(port)
        self.user = user
        self.password = password

    @classmethod
    def from_config(cls, cfg=Config):
        return cls(cfg.MAIL_HOST, cfg.MAIL_PORT, cfg.MAIL_USER, cfg.MAIL_PASS)

    def describe(self):
        return {
            "Host": self.host,
            "Port": self.port,
            "User": self.user,
            "Pass": "***" if self.password else "(vacía)",
        }

    def _context(self):
        ctx = ssl.create_default_context()
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE
        return ctx

    def connect(self) -> smtplib.SMTP_SSL:
        server = smtplib.SMTP_SSL(self.host, self.port, timeout=SMTP_TIMEOUT, context=self._context())
        try:
            server.login(self.user, self.password)
        except Exception:
            server.close()
            raise
        return server

    def verify(self):
        server = self.connect()
        server.quit()

    def send_html(self, to: str, subject: str, html: str):
        """Envía un email HTML. Devuelve (message_id, rechazados)."""
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self.user
        msg["To"] = to
        msg["Message-ID"] = make_msgid(domain=self.user.split("@")[-1] or None)
        msg.set_content("Este mensaje requiere un cliente con soporte HTML.")
        msg.add_alternative(html, subtype="html")

        server = self.connect()
        try:
            refused = server.send_message(msg)
        finally:
            try:
                server.quit()
            except smtplib.SMTPException:
                pass
        return msg["Message-ID"], refused

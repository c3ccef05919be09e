import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    APP_SECRET = os.environ.get("APP_SECRET", "dev-key")
    APP_BASE_URL = os.environ.get("APP_BASE_URL", "http://localhost:3000")

    # MySQL
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_NAME = os.environ.get("DB_NAME", "farmadescanso")

    # SMTP (SSL implícito)
    MAIL_HOST = os.environ.get("MAIL_HOST", "com1008.raiolanetworks.es")
    MAIL_PORT = int(os.environ.get("MAIL_PORT", "465"))
    MAIL_USER = os.environ.get("MAIL_USER", "pedidos@farmadescanso.com")
    MAIL_PASS = os.environ.get("MAIL_PASS", "")
    MAIL_TEST_TO = os.environ.get("MAIL_TEST_TO", MAIL_USER)

    # Puente Holded (webhook N8N)
    N8N_WEBHOOK_URL = os.environ.get("N8N_WEBHOOK_URL", "")
    HTTP_TIMEOUT = int(os.environ.get("HTTP_TIMEOUT", "10"))

    @classmethod
    def db_params(cls):
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
            "charset": "utf8mb4",
        }

import mysql.connector
from flask import current_app
from .config import Config

# ==============================
# Conexión
# ==============================
def connect(params=None):
    """Abre una conexión MySQL (por defecto con las variables DB_* del entorno)."""
    params = params or Config.db_params()
    return mysql.connector.connect(**params)

def get_conn():
    """Conexión usando la config de la app Flask activa."""
    cfg = current_app.config
    return connect({
        "host": cfg["DB_HOST"],
        "port": cfg["DB_PORT"],
        "user": cfg["DB_USER"],
        "password": cfg["DB_PASSWORD"],
        "database": cfg["DB_NAME"],
        "charset": "utf8mb4",
    })

def cursor(conn):
    # buffered: permite fetchone() seguido de otro execute() sin "Unread result found"
    return conn.cursor(dictionary=True, buffered=True)

# ==============================
# Introspección de esquema
# ==============================
def column_info(c, table: str, col: str):
    c.execute(f"SHOW COLUMNS FROM `{table}` WHERE Field = %s", (col,))
    return c.fetchone()

def has_index(c, table: str, name: str) -> bool:
    c.execute(f"SHOW INDEXES FROM `{table}` WHERE Key_name = %s", (name,))
    return bool(c.fetchall())

def describe(c, table: str):
    c.execute(f"DESCRIBE `{table}`")
    return c.fetchall()

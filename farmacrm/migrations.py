from decimal import Decimal
import mysql.connector
from mysql.connector import errorcode
from .db import cursor, column_info, has_index

# ==============================
# Errores benignos
# ==============================
def is_duplicate_column(err) -> bool:
    if getattr(err, "errno", None) == errorcode.ER_DUP_FIELDNAME:
        return True
    return "Duplicate column" in str(err)

def is_duplicate_index(err) -> bool:
    if getattr(err, "errno", None) == errorcode.ER_DUP_KEYNAME:
        return True
    return "Duplicate key name" in str(err)

def add_column(c, table: str, coldef: str) -> bool:
    """ALTER TABLE ... ADD COLUMN; si la columna ya existe no hace nada (idempotente)."""
    try:
        c.execute(f"ALTER TABLE `{table}` ADD COLUMN {coldef}")
    except mysql.connector.Error as e:
        if is_duplicate_column(e):
            return False
        raise
    return True

def add_index(c, table: str, name: str, cols: str) -> bool:
    if has_index(c, table, name):
        return False
    try:
        c.execute(f"ALTER TABLE `{table}` ADD INDEX `{name}` ({cols})")
    except mysql.connector.Error as e:
        if is_duplicate_index(e):
            return False
        raise
    return True

# ==============================
# api_keys
# ==============================
def modify_api_key_column(conn):
    """Amplía api_keys.api_key a VARCHAR(100) ('farma_' + 64 hex). Devuelve (tipo_antes, tipo_despues)."""
    c = cursor(conn)
    before = column_info(c, "api_keys", "api_key")
    c.execute("ALTER TABLE `api_keys` MODIFY COLUMN `api_key` VARCHAR(100) NOT NULL")
    conn.commit()
    after = column_info(c, "api_keys", "api_key")
    c.close()
    return (before["Type"] if before else None, after["Type"] if after else None)

# ==============================
# articulos.PCP
# ==============================
def add_pcp_to_articulos(conn):
    c = cursor(conn)
    col_added = add_column(c, "articulos",
                           "`PCP` DECIMAL(10,2) NULL COMMENT 'Precio de Compra del producto' AFTER `PVL`")
    idx_added = add_index(c, "articulos", "idx_articulo_pcp", "`PCP`")
    conn.commit()
    c.close()
    return col_added, idx_added

def update_pcp_articulo(conn, articulo_id: int = 20, pcp=Decimal("5.38")):
    c = cursor(conn)
    c.execute("UPDATE articulos SET PCP = %s WHERE Id = %s", (pcp, articulo_id))
    rowcount = c.rowcount
    conn.commit()
    c.execute("SELECT Id, SKU, Nombre, PVL, PCP FROM articulos WHERE Id = %s", (articulo_id,))
    row = c.fetchone()
    c.close()
    return rowcount, row

# ==============================
# visitas (reuniones)
# ==============================
def add_emails_invitados(conn) -> bool:
    c = cursor(conn)
    added = add_column(c, "visitas",
                       "`emails_invitados` TEXT NULL "
                       "COMMENT 'Emails de los invitados a la reunión, separados por comas'")
    conn.commit()
    c.close()
    return added

def add_plataforma_reunion(conn) -> bool:
    c = cursor(conn)
    added = add_column(c, "visitas",
                       "`plataforma_reunion` VARCHAR(50) NULL "
                       "COMMENT 'Plataforma de reunión: teams, meet, o manual'")
    conn.commit()
    c.close()
    return added

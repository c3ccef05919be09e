from flask_login import UserMixin
from .db import get_conn, cursor

class User(UserMixin):
    def __init__(self, row):
        self.id = row["Id"]
        self.nombre = row.get("Nombre") or ""
        self.email = row.get("Email") or ""
        self.roll = row.get("Roll") or ""

def find_comercial(where: str, value):
    conn = get_conn(); c = cursor(conn)
    c.execute(f"SELECT Id, Nombre, Email, Password, Roll FROM comerciales WHERE {where} = %s LIMIT 1", (value,))
    row = c.fetchone(); c.close(); conn.close()
    return row

def load_user(user_id):
    row = find_comercial("Id", user_id)
    return User(row) if row else None

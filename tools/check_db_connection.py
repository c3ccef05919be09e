# tools/check_db_connection.py
import os, sys, time, traceback
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from farmacrm.config import Config
from farmacrm.db import connect, cursor

def main():
    print(f"[INFO] Conectando a {Config.DB_HOST}:{Config.DB_PORT}/{Config.DB_NAME}...", flush=True)
    conn = None
    try:
        conn = connect()
        print("[OK] Conectado", flush=True)
        c = cursor(conn)
        t0 = time.monotonic()
        c.execute("SELECT COUNT(*) AS total FROM pedidos")
        total = c.fetchone()["total"]
        print(f"[OK] Query en {(time.monotonic() - t0) * 1000:.0f}ms: {total} pedidos", flush=True)
        c.close()
    except Exception as e:
        print(f"[ERROR] {e}", flush=True)
        traceback.print_exc()
        sys.exit(1)
    finally:
        if conn is not None:
            conn.close()

if __name__ == "__main__":
    main()

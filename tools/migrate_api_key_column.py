# tools/migrate_api_key_column.py
import os, sys, traceback

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from farmacrm import create_app
from farmacrm.db import get_conn
from farmacrm.migrations import modify_api_key_column

def main():
    print(">>> migrate_api_key_column: start", flush=True)
    app = create_app()
    with app.app_context():
        conn = None
        try:
            print("[INFO] Conectando a la base de datos...", flush=True)
            conn = get_conn()
            print("[MIGRATION] api_keys.api_key -> VARCHAR(100)...", flush=True)
            before, after = modify_api_key_column(conn)
            print(f"[INFO] Tipo anterior: {before}", flush=True)
            print(f"[OK] Tipo nuevo: {after}", flush=True)
        except Exception as e:
            print(f"[ERROR] {e}", flush=True)
            traceback.print_exc()
            sys.exit(1)
        finally:
            if conn is not None:
                conn.close()
                print("[INFO] Conexión cerrada", flush=True)
    print(">>> migrate_api_key_column: done", flush=True)

if __name__ == "__main__":
    main()

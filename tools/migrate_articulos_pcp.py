# tools/migrate_articulos_pcp.py
import os, sys, traceback

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from farmacrm import create_app
from farmacrm.db import get_conn
from farmacrm.migrations import add_pcp_to_articulos

def main():
    print(">>> migrate_articulos_pcp: start", flush=True)
    app = create_app()
    with app.app_context():
        conn = None
        try:
            conn = get_conn()
            print("[MIGRATION] Agregando columna PCP a articulos...", flush=True)
            col_added, idx_added = add_pcp_to_articulos(conn)
            print("[OK] Campo PCP agregado" if col_added else "[INFO] El campo PCP ya existe, omitiendo...", flush=True)
            print("[OK] Índice idx_articulo_pcp creado" if idx_added else "[INFO] El índice de PCP ya existe, omitiendo...", flush=True)
        except Exception as e:
            print(f"[ERROR] {e}", flush=True)
            traceback.print_exc()
            sys.exit(1)
        finally:
            if conn is not None:
                conn.close()
    print(">>> migrate_articulos_pcp: done", flush=True)

if __name__ == "__main__":
    main()

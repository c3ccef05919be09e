# tools/migrate_visitas_emails_invitados.py
import os, sys, traceback

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from farmacrm import create_app
from farmacrm.db import get_conn
from farmacrm.migrations import add_emails_invitados

def main():
    print(">>> migrate_visitas_emails_invitados: start", flush=True)
    app = create_app()
    with app.app_context():
        conn = None
        try:
            conn = get_conn()
            print("[MIGRATION] Agregando campo emails_invitados a visitas...", flush=True)
            if add_emails_invitados(conn):
                print("[OK] Campo emails_invitados agregado", flush=True)
            else:
                print("[OK] Campo emails_invitados ya existe", flush=True)
        except Exception as e:
            print(f"[ERROR] {e}", flush=True)
            traceback.print_exc()
            sys.exit(1)
        finally:
            if conn is not None:
                conn.close()
    print(">>> migrate_visitas_emails_invitados: done", flush=True)

if __name__ == "__main__":
    main()

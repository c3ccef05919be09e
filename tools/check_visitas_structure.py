# tools/check_visitas_structure.py
import os, sys, traceback
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from farmacrm import create_app
from farmacrm.db import get_conn, cursor, describe

MEETING_HINTS = ("enlace", "reunion", "link")

app = create_app()
with app.app_context():
    conn = None
    try:
        conn = get_conn()
        c = cursor(conn)
        cols = describe(c, "visitas")
        print("Columnas de la tabla visitas:")
        print("=" * 60)
        for col in cols:
            print(f"  {col['Field']} ({col['Type']}) - Null: {col['Null']}, Default: {col['Default'] or 'NULL'}")
        print("=" * 60, flush=True)

        enlace = next((col for col in cols if any(h in col["Field"].lower() for h in MEETING_HINTS)), None)
        if enlace:
            print(f"[OK] Columna para enlace de reunión: {enlace['Field']}", flush=True)
        else:
            print("[WARN] No hay columna específica para enlace de reunión", flush=True)
        c.close()
    except Exception as e:
        print(f"[ERROR] {e}", flush=True)
        traceback.print_exc()
        sys.exit(1)
    finally:
        if conn is not None:
            conn.close()

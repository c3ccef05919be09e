# tools/update_pcp_articulo.py
import os, sys, traceback
from decimal import Decimal

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from farmacrm import create_app
from farmacrm.db import get_conn
from farmacrm.migrations import update_pcp_articulo
from farmacrm.utils import fmt_eur

ARTICULO_ID = 20
NUEVO_PCP = Decimal("5.38")

def main():
    app = create_app()
    with app.app_context():
        conn = None
        try:
            conn = get_conn()
            print(f"[INFO] Actualizando PCP del artículo {ARTICULO_ID} a {NUEVO_PCP}€...", flush=True)
            rowcount, art = update_pcp_articulo(conn, ARTICULO_ID, NUEVO_PCP)
            print(f"[OK] Filas afectadas: {rowcount}", flush=True)
            if art:
                print("[RESULT] Verificación:")
                print(f"  ID:     {art['Id']}")
                print(f"  SKU:    {art['SKU']}")
                print(f"  Nombre: {art['Nombre']}")
                print(f"  PVL:    {art['PVL']}")
                print(f"  PCP:    {fmt_eur(art['PCP'])}", flush=True)
            else:
                print(f"[WARN] Artículo {ARTICULO_ID} no encontrado", flush=True)
        except Exception as e:
            print(f"[ERROR] {e}", flush=True)
            traceback.print_exc()
            sys.exit(1)
        finally:
            if conn is not None:
                conn.close()

if __name__ == "__main__":
    main()

# tools/push_pedido_holded.py
# Uso: python tools/push_pedido_holded.py [pedidoId]
# Necesita DASHBOARD_EMAIL / DASHBOARD_PASSWORD de un comercial con acceso.
import os, sys
import requests

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from farmacrm.config import Config
from farmacrm.holded import login, send_pedido_to_holded, HoldedError

def main():
    pedido_id = sys.argv[1] if len(sys.argv) > 1 else os.environ.get("PEDIDO_ID")
    email = os.environ.get("DASHBOARD_EMAIL", "")
    password = os.environ.get("DASHBOARD_PASSWORD", "")

    session = requests.Session()
    try:
        login(session, Config.APP_BASE_URL, email, password)
    except (requests.RequestException, HoldedError) as e:
        print(f"[ERROR] No se pudo iniciar sesión: {e}", flush=True)
        sys.exit(1)

    url = send_pedido_to_holded({"pedidoId": pedido_id}, session=session,
                                base_url=Config.APP_BASE_URL,
                                alert=lambda msg: print(f"[ALERT] {msg}", flush=True))
    if not url:
        sys.exit(1)
    print(f"[OK] {url}", flush=True)

if __name__ == "__main__":
    main()

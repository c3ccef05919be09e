# tools/render_cliente_detalle.py
# Renderiza la vista de detalle de cliente con datos mínimos, sin levantar el
# servidor, para detectar variables no definidas en la plantilla.
import os, sys, traceback
from jinja2 import StrictUndefined

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from flask import render_template
from farmacrm import create_app
from farmacrm.utils import is_active, status_label

CLIENTE = {
    "id": 762,
    "OK_KO": "OK",
    "Nombre_Razon_Social": "Fernando Manuel Pedrajas Pastor",
    "Telefono": "965457452",
    "Email": "cliente@example.com",
}

def render():
    app = create_app({"TESTING": True})
    app.jinja_env.undefined = StrictUndefined
    with app.test_request_context("/dashboard/clientes/762"):
        return render_template(
            "dashboard/cliente_detalle.html",
            title="Test Cliente Detalle",
            user={},  # sin "nombre": el navbar debe aguantarlo
            cliente=CLIENTE,
            activo=is_active(CLIENTE["OK_KO"]),
            estado=status_label(CLIENTE["OK_KO"]),
            error=None,
            query={},
        )

if __name__ == "__main__":
    try:
        html = render()
    except Exception as e:
        print(f"[ERROR] Error renderizando plantilla: {e}", flush=True)
        traceback.print_exc()
        sys.exit(1)
    print(f"[OK] Render OK. Longitud HTML: {len(html)}", flush=True)

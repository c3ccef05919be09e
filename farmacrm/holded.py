import re
import requests
from .config import Config

CSRF_RE = re.compile(r'name="csrf_token"[^>]*value="([^"]+)"')

MSG_NO_PAYLOAD = "No se pudo preparar la información del pedido."
MSG_OK = "Se ha realizado la transferencia a Holded"
MSG_FAIL = "No se pudo completar la transferencia a Holded. Inténtalo nuevamente."

class HoldedError(Exception):
    pass

def holded_url(base_url: str, pedido_id) -> str:
    return f"{base_url.rstrip('/')}/dashboard/pedidos/{pedido_id}/holded"

def pedido_url(base_url: str, pedido_id) -> str:
    return f"{base_url.rstrip('/')}/dashboard/pedidos/{pedido_id}?success=pedido_cerrado"

def login(session, base_url: str, email: str, password: str, timeout=None):
    """Inicia sesión en el dashboard (toma el token CSRF del formulario de login)."""
    timeout = timeout or Config.HTTP_TIMEOUT
    url = f"{base_url.rstrip('/')}/login"
    r = session.get(url, timeout=timeout)
    r.raise_for_status()
    m = CSRF_RE.search(r.text)
    data = {"email": email, "password": password}
    if m:
        data["csrf_token"] = m.group(1)
    r = session.post(url, data=data, allow_redirects=False, timeout=timeout)
    if r.status_code not in (302, 303):
        raise HoldedError(f"Login rechazado (HTTP {r.status_code})")
    return session

def send_pedido_to_holded(payload, session=None, base_url: str = "", alert=print, timeout=None):
    """
    Envía un pedido a Holded a través del dashboard.
    Devuelve la URL del pedido cerrado si todo fue bien, None en otro caso.
    Sin pedidoId no se hace ninguna petición.
    """
    if not isinstance(payload, dict) or not payload.get("pedidoId"):
        alert(MSG_NO_PAYLOAD)
        return None

    pedido_id = payload["pedidoId"]
    session = session or requests.Session()
    timeout = timeout or Config.HTTP_TIMEOUT
    try:
        r = session.post(holded_url(base_url, pedido_id), json=payload, timeout=timeout)
        if not r.ok:
            raise HoldedError(r.text or f"Error HTTP {r.status_code}")
        try:
            result = r.json()
        except ValueError:
            raise HoldedError("Respuesta inválida del servidor")
        if not result.get("success"):
            raise HoldedError(result.get("error") or "Respuesta inválida del servidor")
    except (requests.RequestException, HoldedError) as e:
        print(f"[ERROR] Error enviando pedido a Holded: {e}", flush=True)
        alert(MSG_FAIL)
        return None

    alert(MSG_OK)
    return pedido_url(base_url, pedido_id)

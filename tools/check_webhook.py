# tools/check_webhook.py
import os, sys, time
from datetime import datetime
from urllib.parse import urlparse
import requests

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from farmacrm.config import Config

def main():
    url = Config.N8N_WEBHOOK_URL
    if not url:
        print("[ERROR] N8N_WEBHOOK_URL no está configurado (.env)", flush=True)
        sys.exit(1)

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        print(f"[ERROR] La URL no es válida: {url}", flush=True)
        sys.exit(1)
    print(f"[INFO] Webhook: {parsed.scheme}://{parsed.netloc}{parsed.path}", flush=True)

    payload = {
        "test": True,
        "procesoId": f"test_connection_{int(time.time() * 1000)}",
        "timestamp": datetime.now().isoformat(),
    }
    try:
        r = requests.post(url, json=payload, timeout=Config.HTTP_TIMEOUT)
    except requests.RequestException as e:
        print(f"[ERROR] Error al conectar con el webhook: {e}", flush=True)
        sys.exit(1)

    print(f"[INFO] Status: {r.status_code} {r.reason}")
    print(f"[INFO] Response: {r.text[:200]}", flush=True)
    if not r.ok:
        print("[WARN] El webhook respondió con un código no exitoso", flush=True)
        sys.exit(1)
    print("[OK] El webhook de N8N responde correctamente", flush=True)

if __name__ == "__main__":
    main()

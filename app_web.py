# app_web.py: Dashboard de Farmadescanso (Flask + MySQL)
# Servidor de desarrollo; el puerto sale de APP_BASE_URL (3000 por defecto).
import os
from urllib.parse import urlparse
from farmacrm import create_app

app = create_app()

if __name__ == "__main__":
    port = urlparse(app.config["APP_BASE_URL"]).port or 3000
    app.run(host="127.0.0.1", port=port, debug=bool(os.environ.get("FLASK_DEBUG")))

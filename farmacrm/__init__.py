from flask import Flask, render_template
from flask_login import LoginManager
from flask_wtf import CSRFProtect
from .config import Config
from .auth import load_user

login_manager = LoginManager()
login_manager.login_view = "auth.login"
csrf = CSRFProtect()

def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    # Extensiones
    app.secret_key = app.config["APP_SECRET"]
    login_manager.init_app(app)
    csrf.init_app(app)

    @login_manager.user_loader
    def _load(uid):
        return load_user(uid)

    # Blueprints
    from .routes.auth_routes import bp as bp_auth
    from .routes.dashboard import bp as bp_dashboard

    app.register_blueprint(bp_auth)
    app.register_blueprint(bp_dashboard)

    # Error handlers
    @app.errorhandler(404)
    def not_found(e):
        return render_template("error.html", code=404, msg="Página no encontrada."), 404

    @app.errorhandler(500)
    def server_error(e):
        return render_template("error.html", code=500, msg="Error interno."), 500

    return app

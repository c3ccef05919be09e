from flask import Blueprint, render_template, request, redirect, url_for, flash
from flask_login import login_user, logout_user, current_user
from werkzeug.security import check_password_hash
from ..auth import User, find_comercial

bp = Blueprint("auth", __name__)

@bp.route("/login", methods=["GET", "POST"])
def login():
    if request.method == "POST":
        email = (request.form.get("email") or "").strip()
        password = request.form.get("password") or ""
        row = find_comercial("Email", email) if email else None
        if row and row.get("Password") and check_password_hash(row["Password"], password):
            login_user(User(row))
            flash("Sesión iniciada.", "success")
            nxt = request.args.get("next") or ""
            # solo rutas locales
            if not nxt.startswith("/") or nxt.startswith("//"):
                nxt = url_for("dashboard.asignaciones")
            return redirect(nxt)
        flash("Usuario o contraseña incorrectos.", "error")
    return render_template("login.html")

@bp.post("/logout")
def logout():
    if not current_user.is_authenticated:
        return redirect(url_for("auth.login"))
    logout_user()
    flash("Has cerrado la sesión.", "success")
    return redirect(url_for("auth.login"))

import json
import mysql.connector
from flask import Blueprint, render_template, request, abort, jsonify, current_app
from flask_login import login_required, current_user
from .. import csrf
from ..db import get_conn, cursor
from ..utils import is_active, status_label
from ..services.pedidos import (find_pedido, lineas_pedido, build_holded_payload,
                                push_to_webhook, close_pedido, WebhookError)

bp = Blueprint("dashboard", __name__, url_prefix="/dashboard")

@bp.get("/clientes/<int:cid>")
@login_required
def cliente_detalle(cid):
    conn = get_conn(); c = cursor(conn)
    c.execute("SELECT * FROM clientes WHERE Id = %s LIMIT 1", (cid,))
    cliente = c.fetchone(); c.close(); conn.close()
    if not cliente:
        return abort(404)
    return render_template("dashboard/cliente_detalle.html",
        title="Detalle de cliente", user={"nombre": current_user.nombre},
        cliente=cliente, activo=is_active(cliente.get("OK_KO")),
        estado=status_label(cliente.get("OK_KO")), error=None, query=request.args)

@bp.get("/pedidos/<int:pid>")
@login_required
def pedido_detalle(pid):
    conn = get_conn()
    pedido = find_pedido(conn, pid)
    if not pedido:
        conn.close()
        return abort(404)
    lineas = lineas_pedido(conn, pedido.get("NumPedido"))
    conn.close()
    payload = {"pedidoId": pedido["Id"], "numPedido": pedido.get("NumPedido")}
    return render_template("dashboard/pedido_detalle.html",
        title=f"Pedido {pedido.get('NumPedido') or pid}", user={"nombre": current_user.nombre},
        pedido=pedido, lineas=lineas, payload=json.dumps(payload),
        success=request.args.get("success"))

# JSON-only: el botón de Holded envía application/json sin token CSRF
@bp.post("/pedidos/<int:pid>/holded")
@csrf.exempt
@login_required
def pedido_holded(pid):
    if not request.is_json:
        return jsonify(success=False, error="Se esperaba JSON"), 400
    webhook = current_app.config.get("N8N_WEBHOOK_URL")
    if not webhook:
        return jsonify(success=False, error="N8N_WEBHOOK_URL no configurado"), 503

    conn = get_conn()
    try:
        pedido = find_pedido(conn, pid)
        if not pedido:
            return jsonify(success=False, error="Pedido no encontrado"), 404
        lineas = lineas_pedido(conn, pedido.get("NumPedido"))
        payload = build_holded_payload(pedido, lineas, request.get_json(silent=True))
        try:
            push_to_webhook(webhook, payload, timeout=current_app.config["HTTP_TIMEOUT"])
        except WebhookError as e:
            print(f"[ERROR] Holded pedido {pid}: {e}", flush=True)
            return jsonify(success=False, error=str(e)), 502
        try:
            close_pedido(conn, pid)
        except mysql.connector.Error as e:
            print(f"[ERROR] Pedido {pid} enviado a Holded pero no se pudo cerrar: {e}", flush=True)
            return jsonify(success=False, error="Pedido enviado a Holded pero no se pudo cerrar"), 500
    finally:
        conn.close()

    print(f"[OK] Pedido {pid} transferido a Holded y cerrado", flush=True)
    return jsonify(success=True)

@bp.get("/ajustes/asignaciones-comerciales")
@login_required
def asignaciones():
    conn = get_conn(); c = cursor(conn)
    c.execute("""
        SELECT cial.Id, cial.Nombre, cial.Email, COUNT(cl.Id) AS num_clientes
        FROM comerciales cial
        LEFT JOIN clientes cl ON cl.Id_Cial = cial.Id
        GROUP BY cial.Id, cial.Nombre, cial.Email
        ORDER BY cial.Nombre
    """)
    comerciales = c.fetchall(); c.close(); conn.close()
    return render_template("dashboard/asignaciones_comerciales.html",
        title="Asignaciones comerciales", user={"nombre": current_user.nombre},
        comerciales=comerciales)

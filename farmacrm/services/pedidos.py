import requests
from ..db import cursor

ESTADO_CERRADO = "Cerrado"

class WebhookError(Exception):
    pass

def find_pedido(conn, pedido_id: int):
    c = cursor(conn)
    c.execute("""
        SELECT p.*, cl.Nombre_Razon_Social AS cliente_nombre
        FROM pedidos p
        LEFT JOIN clientes cl ON cl.Id = p.Id_Cliente
        WHERE p.Id = %s
        LIMIT 1
    """, (pedido_id,))
    row = c.fetchone()
    c.close()
    return row

def lineas_pedido(conn, num_pedido: str):
    c = cursor(conn)
    c.execute("""
        SELECT pa.Id_Articulo, pa.Cantidad, a.SKU, a.Nombre, a.PVL
        FROM pedidos_articulos pa
        LEFT JOIN articulos a ON a.Id = pa.Id_Articulo
        WHERE pa.NumPedido = %s
        ORDER BY pa.Id ASC
    """, (num_pedido,))
    rows = c.fetchall()
    c.close()
    return rows

def build_holded_payload(pedido, lineas, extra=None):
    """Payload enviado al webhook de N8N (que lo traslada a Holded)."""
    payload = dict(extra) if isinstance(extra, dict) else {}
    payload.update({
        "pedidoId": pedido["Id"],
        "numPedido": pedido.get("NumPedido"),
        "clienteId": pedido.get("Id_Cliente"),
        "cliente": pedido.get("cliente_nombre"),
        "fecha": str(pedido["FechaPedido"]) if pedido.get("FechaPedido") else None,
        "lineas": [
            {
                "articuloId": l["Id_Articulo"],
                "sku": l.get("SKU"),
                "nombre": l.get("Nombre"),
                "cantidad": float(l["Cantidad"] or 0),
                "pvl": float(l["PVL"]) if l.get("PVL") is not None else None,
            }
            for l in lineas
        ],
    })
    return payload

def push_to_webhook(url: str, payload: dict, timeout: int = 10):
    try:
        r = requests.post(url, json=payload, timeout=timeout)
    except requests.RequestException as e:
        raise WebhookError(f"No se pudo conectar con el webhook: {e}") from e
    if not r.ok:
        raise WebhookError(f"El webhook respondió HTTP {r.status_code}")
    return r

def close_pedido(conn, pedido_id: int):
    c = cursor(conn)
    c.execute("UPDATE pedidos SET EstadoPedido = %s WHERE Id = %s", (ESTADO_CERRADO, pedido_id))
    conn.commit()
    c.close()

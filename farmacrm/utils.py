from decimal import Decimal

ACTIVE_STRINGS = {"OK", "1", "TRUE"}

def is_active(ok_ko) -> bool:
    """
    Interpreta el campo legado OK_KO tal como llega de MySQL.
      - NULL -> activo
      - bool -> tal cual
      - número -> activo solo si vale 1
      - texto -> activo si es OK / 1 / TRUE (sin mayúsculas ni espacios)
      - cualquier otro tipo -> activo
    Un texto no reconocido cuenta como inactivo, pero un tipo no reconocido
    cuenta como activo.
    """
    if ok_ko is None:
        return True
    # bool antes que int: True == 1 en Python
    if isinstance(ok_ko, bool):
        return ok_ko
    if isinstance(ok_ko, (int, float, Decimal)):
        return ok_ko == 1
    if isinstance(ok_ko, (bytes, bytearray)):
        ok_ko = ok_ko.decode("utf-8", errors="replace")
    if isinstance(ok_ko, str):
        return ok_ko.strip().upper() in ACTIVE_STRINGS
    return True

def status_label(ok_ko) -> str:
    return "Activo" if is_active(ok_ko) else "Inactivo"

def fmt_eur(value):
    if value is None:
        return "NULL"
    return f"{value}€"

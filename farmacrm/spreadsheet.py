from collections import namedtuple
from openpyxl import load_workbook

SheetPreview = namedtuple("SheetPreview", "sheet_name headers first_row total_rows")

def read_sheet(path) -> SheetPreview:
    """Lee la primera hoja: cabeceras, primera fila de datos y total de filas (con cabecera)."""
    wb = load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.worksheets[0]
        rows = [list(r) for r in ws.iter_rows(values_only=True)]
        sheet_name = ws.title
    finally:
        wb.close()

    if len(rows) < 2:
        raise ValueError("El archivo no tiene suficientes filas")

    headers = rows[0]
    first = rows[1] + [None] * (len(headers) - len(rows[1]))
    return SheetPreview(sheet_name, headers, first[:len(headers)], len(rows))

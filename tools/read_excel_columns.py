# tools/read_excel_columns.py
# Uso: python tools/read_excel_columns.py [ruta.xlsx]   (por defecto EXCEL_FILE)
import os, sys
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from farmacrm.spreadsheet import read_sheet

EXCEL_FILE = os.environ.get("EXCEL_FILE", "Clientes_exported_1.xlsx")

def main():
    path = sys.argv[1] if len(sys.argv) > 1 else EXCEL_FILE
    print(f"[INFO] Leyendo archivo Excel: {path}", flush=True)
    try:
        preview = read_sheet(path)
    except Exception as e:
        print(f"[ERROR] Error leyendo el archivo Excel: {e}", flush=True)
        sys.exit(1)

    print(f"[INFO] Hoja encontrada: {preview.sheet_name}")
    print("\nColumnas encontradas en el Excel:")
    print("=" * 80)
    for i, h in enumerate(preview.headers, start=1):
        print(f"{i}. {h or '(vacío)'}")

    print("\nEjemplo de primera fila de datos:")
    print("=" * 80)
    for h, v in zip(preview.headers, preview.first_row):
        print(f"{h}: {v if v not in (None, '') else '(vacío)'}")

    print(f"\n[OK] Total de filas (incluyendo encabezado): {preview.total_rows}")
    print(f"[OK] Total de columnas: {len(preview.headers)}", flush=True)

if __name__ == "__main__":
    main()

# tools/check_okko_logic.py
# Muestra cómo se interpreta OK_KO para los valores que puede devolver MySQL.
import os, sys
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from farmacrm.utils import status_label

SAMPLES = [
    (1, "Número 1"),
    (0, "Número 0"),
    ("1", 'Texto "1"'),
    ("0", 'Texto "0"'),
    ("OK", 'Texto "OK"'),
    ("KO", 'Texto "KO"'),
    (" ok ", 'Texto " ok "'),
    (True, "Booleano true"),
    (False, "Booleano false"),
    (None, "NULL"),
]

print(">>> check_okko_logic: start", flush=True)
for value, desc in SAMPLES:
    print(f"{desc:20} valor={value!r:8} ({type(value).__name__:8}) -> {status_label(value)}")
print(">>> check_okko_logic: done", flush=True)

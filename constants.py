"""
Constantes centralizadas del editor CSV.

- Rutas por defecto (archivo de entrada y de salida)
- Formato del archivo: delimitador, salto de línea, codificaciones
- Formato de visualización y de logs
"""

from typing import Final

APP_NAME: Final[str] = "Editor CSV"

# ---- Rutas por defecto -----------------------------------------------------
DEFAULT_INPUT_PATH: Final[str] = "testdata.csv"
DEFAULT_OUTPUT_PATH: Final[str] = "output.csv"

# ---- Formato del archivo ---------------------------------------------------
DELIMITER: Final[str] = ","
LINE_BREAK: Final[str] = "\n"

# Se prueban en orden; latin-1 nunca falla, por eso va al final
READ_ENCODINGS: Final[tuple[str, ...]] = ("utf-8-sig", "utf-8", "latin-1")
WRITE_ENCODING: Final[str] = "utf-8"

# Separadores al guardar: según 'fields' de la tabla (por defecto) o según cada fila
SEPARATORS_BY_COLUMNS: Final[str] = "columns"
SEPARATORS_BY_ROW: Final[str] = "row"

# ---- Visualización -----------------------------------------------------------
DISPLAY_SEPARATOR: Final[str] = ", "
EXCEL_SHEET_NAME: Final[str] = "Datos"

# ---- Logs ------------------------------------------------------------------
LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")

import logging
import os
import re
from typing import List

import pandas as pd

from constants import (
    DELIMITER, LINE_BREAK, READ_ENCODINGS, WRITE_ENCODING,
    SEPARATORS_BY_COLUMNS, SEPARATORS_BY_ROW, EXCEL_SHEET_NAME,
)
from models.csv_model import CSVData

logger = logging.getLogger(__name__)

LINE_BOUNDARY = re.compile(r"\r\n|\r|\n")


class CSVServiceError(Exception):
    pass


class CSVService:
    """
    Servicio de lectura/escritura del CSV.
    - Sin comillas ni escapes: el delimitador es siempre ','.
    - Recorta espacios de cada campo solo al leer.
    - Al guardar no deja salto de línea después de la última fila.
    """

    @staticmethod
    def parse_text(text: str) -> List[List[str]]:
        # Solo \r\n, \r y \n cortan filas; \x0b, \x85 o \u2028 quedan dentro del campo
        lines = LINE_BOUNDARY.split(text)
        if lines and lines[-1] == "":
            lines.pop()
        return [[field.strip() for field in line.split(DELIMITER)] for line in lines]

    @staticmethod
    def read_csv(path: str) -> CSVData:
        # 1. Intentar leer con diferentes codificaciones
        content = None
        used_encoding = None
        for enc in READ_ENCODINGS:
            try:
                with open(path, "r", encoding=enc, newline="") as f:
                    content = f.read()
                used_encoding = enc
                break
            except UnicodeDecodeError:
                continue
            except OSError as e:
                raise CSVServiceError(f"Error de lectura: {e}") from e

        if content is None:
            raise CSVServiceError(f"No se pudo decodificar el archivo: {path}")

        # 2. Partir en filas y campos (se toleran filas irregulares)
        rows = CSVService.parse_text(content)
        data = CSVData(rows=rows, source_path=path, encoding=used_encoding)
        logger.info("Leído %s: %d filas x %d campos (%s)", path, data.records, data.fields, used_encoding)
        return data

    @staticmethod
    def format_csv(data: CSVData, separator_mode: str = SEPARATORS_BY_COLUMNS) -> str:
        if separator_mode == SEPARATORS_BY_ROW:
            lines = [DELIMITER.join(row) for row in data.rows]
        elif separator_mode == SEPARATORS_BY_COLUMNS:
            # Separador después del campo j solo si j < fields - 1
            lines = []
            for row in data.rows:
                parts = []
                for j, field in enumerate(row):
                    parts.append(field)
                    if j < data.fields - 1:
                        parts.append(DELIMITER)
                lines.append("".join(parts))
        else:
            raise ValueError(f"Modo de separadores desconocido: {separator_mode}")
        return LINE_BREAK.join(lines)

    @staticmethod
    def write_csv(data: CSVData, path: str, overwrite_existing: bool,
                  separator_mode: str = SEPARATORS_BY_COLUMNS) -> None:
        text = CSVService.format_csv(data, separator_mode)

        # Sobrescribir exige que el destino exista; crear lo reemplaza si ya existe
        if overwrite_existing and not os.path.isfile(path):
            raise CSVServiceError(f"No existe el archivo a sobrescribir: {path}")

        try:
            with open(path, "w", encoding=WRITE_ENCODING, newline="") as f:
                f.write(text)
        except OSError as e:
            raise CSVServiceError(f"Error de escritura: {e}") from e
        logger.info("Guardado %s (%d filas)", path, data.records)

    # =========================================================================
    #  EXPORTACIÓN A EXCEL
    # =========================================================================
    @staticmethod
    def to_dataframe(data: CSVData) -> pd.DataFrame:
        width = max([data.fields] + [len(row) for row in data.rows])
        padded = [row + [""] * (width - len(row)) for row in data.rows]
        return pd.DataFrame(padded, columns=[f"Col {i}" for i in range(1, width + 1)])

    @staticmethod
    def export_excel(data: CSVData, path: str, sheet_name: str = EXCEL_SHEET_NAME) -> None:
        df = CSVService.to_dataframe(data)
        try:
            with pd.ExcelWriter(path, engine="openpyxl") as writer:
                df.to_excel(writer, sheet_name=sheet_name, index=False)

                sheet = writer.sheets[sheet_name]
                for column in sheet.columns:
                    cells = [cell for cell in column]
                    # Los campos son texto: '=a' no debe quedar como fórmula
                    for cell in cells:
                        if cell.data_type == "f":
                            cell.data_type = "s"
                    # Ajustar ancho de columnas al valor más largo
                    max_length = max(len(str(cell.value)) if cell.value is not None else 0 for cell in cells)
                    sheet.column_dimensions[cells[0].column_letter].width = max_length + 2
        except Exception as e:
            raise CSVServiceError(f"Error al exportar a Excel: {e}") from e
        logger.info("Exportado %s (%d filas)", path, data.records)

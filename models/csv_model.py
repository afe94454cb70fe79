from enum import Enum
from typing import Iterator, List, Optional, Tuple

from constants import DISPLAY_SEPARATOR


class EditResult(Enum):
    """Resultado de una edición: OK o índice fuera de rango (no se tocó nada)."""
    OK = "ok"
    INDEX_OUT_OF_RANGE = "index_out_of_range"

    @property
    def ok(self) -> bool:
        return self is EditResult.OK


class CSVData:
    """
    Representa el CSV en memoria:
      - rows: lista de listas de strings (el orden define el índice de fila)
      - records: cantidad de filas, siempre igual a len(rows)
      - fields: cantidad de campos de la primera fila al cargar.
        No se exige en cada fila (se toleran filas irregulares).
    Todos los índices expuestos son base 1.
    """
    def __init__(self, rows=None, fields=None, source_path=None, encoding="utf-8"):
        self.rows: List[List[str]] = rows or []
        self.records = len(self.rows)
        if fields is None:
            fields = len(self.rows[0]) if self.rows else 0
        self.fields = fields
        self.source_path: Optional[str] = source_path
        self.encoding = encoding

    # =========================================================================
    #  CONSULTAS
    # =========================================================================
    def iter_rows(self, start: int = 1, end: Optional[int] = None) -> Iterator[Tuple[int, List[str]]]:
        """Pares (índice, fila) de start..end; los índices inválidos se saltan."""
        if end is None:
            end = self.records
        # Recortar al rango válido: el costo depende de la tabla, no de los números pedidos
        lo, hi = max(start, 1), min(end, self.records)
        for i in range(lo, hi + 1):
            yield i, self.rows[i - 1]

    @staticmethod
    def render_row(row: List[str]) -> str:
        return "".join(f"{field}{DISPLAY_SEPARATOR}" for field in row)

    def display(self) -> Iterator[str]:
        for _, row in self.iter_rows():
            yield self.render_row(row)

    def paginate(self, start: int, end: int) -> Iterator[str]:
        for _, row in self.iter_rows(start, end):
            yield self.render_row(row)

    def row_at(self, index: int) -> Optional[List[str]]:
        if 1 <= index <= self.records:
            return list(self.rows[index - 1])
        return None

    def ragged_rows(self) -> List[int]:
        return [i for i, row in self.iter_rows() if len(row) != self.fields]

    # =========================================================================
    #  MUTACIONES
    # =========================================================================
    def delete_row(self, index: int) -> EditResult:
        if not 1 <= index <= self.records:
            return EditResult.INDEX_OUT_OF_RANGE
        del self.rows[index - 1]
        self.records -= 1
        return EditResult.OK

    def modify_field(self, row: int, col: int, new_value: str) -> EditResult:
        if not (1 <= row <= self.records and 1 <= col <= self.fields):
            return EditResult.INDEX_OUT_OF_RANGE
        target = self.rows[row - 1]
        # La fila puede ser más corta que 'fields'
        if col > len(target):
            return EditResult.INDEX_OUT_OF_RANGE
        target[col - 1] = new_value
        return EditResult.OK

    def normalize(self, fill_value: str = "", truncate: bool = False) -> int:
        """
        Ajusta las filas irregulares al ancho 'fields'.
        Las cortas se rellenan con fill_value; las largas solo se cortan si truncate=True.
        Devuelve cuántas filas cambiaron.
        """
        changed = 0
        for row in self.rows:
            current = len(row)
            if current < self.fields:
                row.extend([fill_value] * (self.fields - current))
                changed += 1
            elif current > self.fields and truncate:
                del row[self.fields:]
                changed += 1
        return changed

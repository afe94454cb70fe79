import logging
from typing import Iterator, List, Optional

from constants import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH, SEPARATORS_BY_COLUMNS
from models.csv_model import CSVData, EditResult
from services.csv_service import CSVService, CSVServiceError

logger = logging.getLogger(__name__)


class CSVContext:
    """Sesión de edición: la crea el driver y se pasa a cada operación."""
    def __init__(self):
        self.data: CSVData | None = None
        self.path: str | None = None
        self.dirty = False
        self.last_result: EditResult | None = None


class CSVController:
    def __init__(self, output_path: str = DEFAULT_OUTPUT_PATH):
        self.output_path = output_path
        self.last_warning: str | None = None

    def _require_data(self, ctx: CSVContext) -> CSVData:
        if ctx.data is None:
            raise CSVServiceError("No hay datos cargados.")
        return ctx.data

    # --- LECTURA ---
    def load_csv(self, ctx: CSVContext, path: str) -> CSVData:
        try:
            data = CSVService.read_csv(path)
        except CSVServiceError: raise
        except Exception as e: raise CSVServiceError(f"Error inesperado al leer CSV: {e}") from e

        ctx.data = data
        ctx.path = path
        ctx.dirty = False
        ctx.last_result = None
        self.last_warning = None

        ragged = data.ragged_rows()
        if ragged:
            self.last_warning = f"{len(ragged)} fila(s) con cantidad de campos distinta de {data.fields}."
            logger.warning("%s: filas irregulares %s", path, ragged)
        return data

    # --- CONSULTAS ---
    def display(self, ctx: CSVContext) -> Iterator[str]:
        return self._require_data(ctx).display()

    def paginate(self, ctx: CSVContext, start: int, end: int) -> Iterator[str]:
        return self._require_data(ctx).paginate(start, end)

    def ragged_rows(self, ctx: CSVContext) -> List[int]:
        return self._require_data(ctx).ragged_rows()

    # --- EDICIÓN ---
    def _record(self, ctx: CSVContext, result: EditResult, message: str) -> EditResult:
        ctx.last_result = result
        if result.ok:
            ctx.dirty = True
            self.last_warning = None
        else:
            self.last_warning = message
            logger.debug(message)
        return result

    def delete_row(self, ctx: CSVContext, index: int) -> EditResult:
        data = self._require_data(ctx)
        result = data.delete_row(index)
        return self._record(ctx, result, f"Fila {index} fuera de rango (1..{data.records}).")

    def modify_field(self, ctx: CSVContext, row: int, col: int, value: str) -> EditResult:
        data = self._require_data(ctx)
        result = data.modify_field(row, col, value)
        return self._record(ctx, result, f"Celda ({row}, {col}) fuera de rango.")

    def normalize(self, ctx: CSVContext, fill_value: str = "", truncate: bool = False) -> int:
        changed = self._require_data(ctx).normalize(fill_value, truncate)
        if changed:
            ctx.dirty = True
        return changed

    # --- ESCRITURA ---
    def resolve_save_path(self, ctx: CSVContext, overwrite_existing: bool) -> str:
        if overwrite_existing:
            return ctx.path or DEFAULT_INPUT_PATH
        return self.output_path

    def save(self, ctx: CSVContext, overwrite_existing: bool, path: Optional[str] = None,
             separator_mode: str = SEPARATORS_BY_COLUMNS) -> str:
        data = self._require_data(ctx)
        target = path or self.resolve_save_path(ctx, overwrite_existing)
        CSVService.write_csv(data, target, overwrite_existing, separator_mode)
        ctx.dirty = False
        return target

    def export_excel(self, ctx: CSVContext, path: str) -> str:
        CSVService.export_excel(self._require_data(ctx), path)
        return path

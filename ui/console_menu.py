from typing import Callable

from controllers.csv_controller import CSVContext, CSVController
from services.csv_service import CSVServiceError

MENU_OPTIONS = [
    "1. Mostrar todo el archivo",
    "2. Paginar",
    "3. Eliminar una fila",
    "4. Modificar un campo",
    "5. Guardar en archivo",
    "6. Exportar a Excel",
    "7. Revisar filas irregulares",
    "8. Normalizar filas",
    "9. Salir",
]


class ConsoleMenu:
    """
    Menú de texto sobre un CSVContext.
    input_func/output_func se pueden reemplazar (p.ej. en pruebas).
    """

    def __init__(self, controller: CSVController, ctx: CSVContext,
                 input_func: Callable[[str], str] = input, output_func: Callable[..., None] = print):
        self.controller = controller
        self.ctx = ctx
        self.input = input_func
        self.output = output_func
        self._actions = {
            1: self.show_all,
            2: self.show_page,
            3: self.delete_row,
            4: self.modify_field,
            5: self.save,
            6: self.export_excel,
            7: self.check_ragged,
            8: self.normalize,
        }

    # --- LECTURA DE ENTRADA ---
    def read_number(self, prompt: str) -> int:
        # Entrada inválida -> 0, que después falla el chequeo de rango
        try:
            return int(self.input(prompt).strip())
        except ValueError:
            return 0

    def read_text(self, prompt: str) -> str:
        return self.input(prompt).strip()

    # --- BUCLE PRINCIPAL ---
    def run(self) -> None:
        # Ctrl-D / Ctrl-C o fin de la entrada: salir igual que con la opción 9
        try:
            self._loop()
        except (EOFError, KeyboardInterrupt):
            self.output("")
            self.output("Fin de la entrada. Saliendo.")

    def _loop(self) -> None:
        while True:
            self.output("Opciones:")
            for line in MENU_OPTIONS:
                self.output(line)

            choice = self.input("> ").strip()
            try:
                choice = int(choice)
            except ValueError:
                self.output("Entrada inválida. Ingrese un número.")
                continue

            if choice == 9:
                break
            action = self._actions.get(choice)
            if action is None:
                self.output("Opción inválida")
                continue
            try:
                action()
            except CSVServiceError as e:
                self.output(f"Error: {e}")

    # --- ACCIONES ---
    def show_all(self) -> None:
        for line in self.controller.display(self.ctx):
            self.output(line)

    def show_page(self) -> None:
        start = self.read_number("Índice inicial: ")
        end = self.read_number("Índice final: ")
        for line in self.controller.paginate(self.ctx, start, end):
            self.output(line)

    def _report(self, result) -> None:
        if not result.ok and self.controller.last_warning:
            self.output(self.controller.last_warning)

    def delete_row(self) -> None:
        index = self.read_number("Fila a eliminar: ")
        self._report(self.controller.delete_row(self.ctx, index))

    def modify_field(self) -> None:
        row = self.read_number("Fila: ")
        col = self.read_number("Columna: ")
        value = self.read_text("Nuevo valor: ")
        self._report(self.controller.modify_field(self.ctx, row, col, value))

    def save(self) -> None:
        answer = self.read_text("¿Guardar en el archivo existente? (y/n) ")
        overwrite = answer.lower() == "y"
        path = self.controller.save(self.ctx, overwrite)
        self.output(f"Datos guardados en: {path}")

    def export_excel(self) -> None:
        path = self.read_text("Archivo .xlsx de destino: ")
        if not path:
            self.output("Exportación cancelada.")
            return
        self.controller.export_excel(self.ctx, path)
        self.output(f"Exportado a: {path}")

    def check_ragged(self) -> None:
        ragged = self.controller.ragged_rows(self.ctx)
        if not ragged:
            self.output("Todas las filas tienen la misma cantidad de campos.")
            return
        self.output("Filas irregulares: " + ", ".join(str(i) for i in ragged))

    def normalize(self) -> None:
        changed = self.controller.normalize(self.ctx)
        self.output(f"Filas normalizadas: {changed}")

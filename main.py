"""
Punto de entrada del editor CSV.

- Lee argumentos (archivo, --gui, --output, --log-level)
- Configura los logs
- Carga el CSV en un CSVContext y arranca el menú de consola o la ventana
"""

import argparse
import logging
import sys

from constants import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH, LOG_FORMAT, LOG_LEVELS
from controllers.csv_controller import CSVContext, CSVController
from services.csv_service import CSVServiceError


def _parse_args(argv):
    p = argparse.ArgumentParser(prog="csv-editor", add_help=True)
    p.add_argument("path", nargs="?", default=DEFAULT_INPUT_PATH,
                   help=f"Archivo CSV a editar (por defecto: {DEFAULT_INPUT_PATH}).")
    p.add_argument("--gui", action="store_true",
                   help="Abrir la ventana en lugar del menú de consola.")
    p.add_argument("--output", default=DEFAULT_OUTPUT_PATH,
                   help=f"Archivo para 'guardar como nuevo' (por defecto: {DEFAULT_OUTPUT_PATH}).")
    p.add_argument("--log-level", type=str, default="WARNING", choices=LOG_LEVELS,
                   help="Nivel de logs en consola.")
    return p.parse_args(argv)


def _configure_logging(level):
    logger = logging.getLogger()
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(ch)
    logger.setLevel(getattr(logging, level))


def main(argv=None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    _configure_logging(args.log_level)

    controller = CSVController(output_path=args.output)
    ctx = CSVContext()

    if args.gui:
        from ui.main_window import MainWindow
        try:
            controller.load_csv(ctx, args.path)
        except CSVServiceError as e:
            logging.getLogger(__name__).warning("No se cargó %s: %s", args.path, e)
        MainWindow(controller, ctx).run()
        return 0

    from ui.console_menu import ConsoleMenu
    try:
        controller.load_csv(ctx, args.path)
    except CSVServiceError as e:
        print(f"Error leyendo el archivo CSV: {e}")
        return 1
    if controller.last_warning:
        print(f"Aviso: {controller.last_warning}")
    ConsoleMenu(controller, ctx).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

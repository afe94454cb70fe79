import tkinter as tk
from tkinter import ttk, filedialog, messagebox, simpledialog

from constants import APP_NAME
from controllers.csv_controller import CSVContext, CSVController
from ui.table_view import TableView


class MainWindow:
    def __init__(self, controller: CSVController, ctx: CSVContext):
        self.controller = controller
        self.ctx = ctx

        self.window = tk.Tk()
        self.window.title(APP_NAME)
        self.window.geometry("1100x700")
        self.window.protocol("WM_DELETE_WINDOW", self.on_closing)

        self.toolbar = ttk.Frame(self.window, relief=tk.RAISED, borderwidth=1)
        self.toolbar.pack(side="top", fill="x")
        ttk.Button(self.toolbar, text="📂 Abrir CSV", command=self.open_action).pack(side="left", padx=5, pady=5)
        ttk.Button(self.toolbar, text="💾 Guardar", command=self.save_action).pack(side="left", padx=5, pady=5)
        ttk.Button(self.toolbar, text="📄 Guardar como nuevo", command=self.save_new_action).pack(side="left", padx=5, pady=5)
        ttk.Button(self.toolbar, text="📊 Exportar Excel", command=self.export_excel).pack(side="left", padx=5, pady=5)
        ttk.Separator(self.toolbar, orient="vertical").pack(side="left", fill="y", padx=10, pady=5)
        ttk.Button(self.toolbar, text="🗑️ Eliminar fila", command=self.delete_row_action).pack(side="left", padx=5, pady=5)
        ttk.Button(self.toolbar, text="✏️ Modificar campo", command=self.modify_field_action).pack(side="left", padx=5, pady=5)
        ttk.Button(self.toolbar, text="📐 Normalizar", command=self.normalize_action).pack(side="left", padx=5, pady=5)

        pager = ttk.Frame(self.window)
        pager.pack(side="top", fill="x", padx=10, pady=(5, 0))
        ttk.Label(pager, text="Desde:").pack(side="left")
        self.spin_start = ttk.Spinbox(pager, from_=1, to=1_000_000, width=7)
        self.spin_start.set(1)
        self.spin_start.pack(side="left", padx=5)
        ttk.Label(pager, text="Hasta:").pack(side="left")
        self.spin_end = ttk.Spinbox(pager, from_=1, to=1_000_000, width=7)
        self.spin_end.set(50)
        self.spin_end.pack(side="left", padx=5)
        ttk.Button(pager, text="Paginar", command=self.paginate_action).pack(side="left", padx=5)
        ttk.Button(pager, text="Ver todo", command=self.refresh_table).pack(side="left", padx=5)

        self.table = TableView(self.window)
        self.table.pack(fill="both", expand=True, padx=10, pady=10)

        self.status_frame = ttk.Frame(self.window, relief=tk.SUNKEN, padding=(5, 2))
        self.status_frame.pack(side="bottom", fill="x")
        self.lbl_status = ttk.Label(self.status_frame, text="Listo", anchor="w")
        self.lbl_status.pack(side="left", fill="x")

        if self.ctx.data is not None:
            self.refresh_table()

    def run_task(self, description, func):
        self.window.config(cursor="watch")
        self.lbl_status.config(text=f"⏳ {description}...")
        self.window.update()
        try:
            func()
            self.lbl_status.config(text="✅ Listo")
        except Exception as e:
            self.lbl_status.config(text="❌ Error")
            messagebox.showerror("Error", str(e))
        finally:
            self.window.config(cursor="")

    # --- TABLA ---
    def _show(self, indexed_rows):
        data = self.ctx.data
        width = max([data.fields] + [len(row) for row in data.rows])
        self.table.show_rows(width, indexed_rows)
        if self.controller.last_warning:
            messagebox.showwarning("Aviso", self.controller.last_warning)
            self.controller.last_warning = None

    def refresh_table(self):
        if self.ctx.data is None: return
        self._show(self.ctx.data.iter_rows())

    def _read_spin(self, spin):
        try: return int(spin.get())
        except ValueError: return 0

    def paginate_action(self):
        if self.ctx.data is None: return
        start, end = self._read_spin(self.spin_start), self._read_spin(self.spin_end)
        self._show(self.ctx.data.iter_rows(start, end))

    # --- ARCHIVOS ---
    def open_action(self):
        path = filedialog.askopenfilename(filetypes=[("CSV", "*.csv"), ("Todos", "*.*")])
        if not path: return
        self.run_task("Cargando archivo", lambda: self._load(path))

    def _load(self, path):
        self.controller.load_csv(self.ctx, path)
        self.window.title(f"{APP_NAME} - {path}")
        self.refresh_table()

    def save_action(self):
        if self.ctx.data is None: return
        def _save():
            path = self.controller.save(self.ctx, overwrite_existing=True)
            messagebox.showinfo("Éxito", f"Datos guardados en: {path}")
        self.run_task("Guardando", _save)

    def save_new_action(self):
        if self.ctx.data is None: return
        path = filedialog.asksaveasfilename(initialfile=self.controller.output_path, defaultextension=".csv",
                                            filetypes=[("CSV", "*.csv")])
        if not path: return
        self.run_task("Guardando", lambda: self.controller.save(self.ctx, overwrite_existing=False, path=path))

    def export_excel(self):
        if self.ctx.data is None: return
        path = filedialog.asksaveasfilename(defaultextension=".xlsx", filetypes=[("Excel", "*.xlsx")])
        if not path: return
        self.run_task("Exportando", lambda: self.controller.export_excel(self.ctx, path))

    # --- EDICIÓN ---
    def delete_row_action(self):
        if self.ctx.data is None: return
        index = simpledialog.askinteger("Eliminar fila", "Fila a eliminar:", parent=self.window)
        if index is None: return
        self.controller.delete_row(self.ctx, index)
        self.refresh_table()

    def modify_field_action(self):
        if self.ctx.data is None: return
        row = simpledialog.askinteger("Modificar campo", "Fila:", parent=self.window)
        if row is None: return
        col = simpledialog.askinteger("Modificar campo", "Columna:", parent=self.window)
        if col is None: return
        value = simpledialog.askstring("Modificar campo", "Nuevo valor:", parent=self.window)
        if value is None: return
        self.controller.modify_field(self.ctx, row, col, value.strip())
        self.refresh_table()

    def normalize_action(self):
        if self.ctx.data is None: return
        changed = self.controller.normalize(self.ctx)
        self.refresh_table()
        self.lbl_status.config(text=f"Filas normalizadas: {changed}")

    def on_closing(self):
        if self.ctx.dirty and not messagebox.askokcancel("Salir", "Hay cambios sin guardar. ¿Seguro que quieres salir?"):
            return
        self.window.destroy()

    def run(self): self.window.mainloop()

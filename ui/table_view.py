import tkinter as tk
from tkinter import ttk

INDEX_COLUMN = "#"
INDEX_WIDTH = 60
FIELD_WIDTH = 140


class TableView(ttk.Frame):
    """Tabla de solo lectura: columna '#' con el índice base 1 y una columna por campo."""

    def __init__(self, parent, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self._build_search_bar()
        self._build_grid()
        # Pares (índice base 1, fila)
        self._all_data = []
        self._current_columns = []

    def _build_search_bar(self):
        bar = ttk.Frame(self)
        bar.pack(fill="x", pady=(0, 5))
        ttk.Label(bar, text="Filtrar filas:").pack(side="left", padx=(0, 5))
        self.search_var = tk.StringVar()
        self.search_entry = ttk.Entry(bar, textvariable=self.search_var, width=30)
        self.search_entry.pack(side="left", padx=(0, 10))
        self.search_entry.bind("<KeyRelease>", self._on_search)
        ttk.Button(bar, text="Limpiar", command=self._clear_search).pack(side="left")
        self.status_label = ttk.Label(bar, text="")
        self.status_label.pack(side="right")

    def _build_grid(self):
        grid = ttk.Frame(self)
        grid.pack(fill="both", expand=True)
        grid.rowconfigure(0, weight=1)
        grid.columnconfigure(0, weight=1)
        self._tree = ttk.Treeview(grid, show="headings", selectmode="browse")
        scroll_y = ttk.Scrollbar(grid, orient="vertical", command=self._tree.yview)
        scroll_x = ttk.Scrollbar(grid, orient="horizontal", command=self._tree.xview)
        self._tree.configure(yscrollcommand=scroll_y.set, xscrollcommand=scroll_x.set)
        self._tree.grid(row=0, column=0, sticky="nsew")
        scroll_y.grid(row=0, column=1, sticky="ns")
        scroll_x.grid(row=1, column=0, sticky="ew")

    def _on_search(self, event=None):
        search_term = self.search_var.get().lower()
        if not search_term:
            self._display_data(self._all_data)
            self.status_label.config(text=f"Mostrando {len(self._all_data)} filas")
            return
        filtered_data = [(i, row) for i, row in self._all_data
                         if any(search_term in cell.lower() for cell in row)]
        self._display_data(filtered_data)
        self.status_label.config(text=f"Mostrando {len(filtered_data)} de {len(self._all_data)} filas")

    def _clear_search(self):
        self.search_var.set("")
        self._display_data(self._all_data)
        self.status_label.config(text=f"Mostrando {len(self._all_data)} filas")

    def _display_data(self, data):
        for r in self._tree.get_children(): self._tree.delete(r)
        if not self._current_columns: return
        width = len(self._current_columns) - 1
        for index, row in data:
            # Filas irregulares: se rellenan solo para mostrar, el modelo no cambia
            safe_row = [row[i] if i < len(row) else "" for i in range(width)]
            self._tree.insert("", "end", values=(index, *safe_row))

    def clear(self):
        for r in self._tree.get_children(): self._tree.delete(r)
        self._tree["columns"] = ()

    def show_rows(self, width, indexed_rows):
        """width: cantidad de columnas a mostrar; indexed_rows: iterable de (índice, fila)."""
        self.clear()
        self._all_data = [(i, list(row)) for i, row in indexed_rows]
        self._current_columns = [INDEX_COLUMN] + [str(c) for c in range(1, width + 1)]
        self._tree["columns"] = tuple(self._current_columns)
        for col in self._current_columns:
            self._tree.heading(col, text=col)
            self._tree.column(col, anchor="w", width=INDEX_WIDTH if col == INDEX_COLUMN else FIELD_WIDTH)
        self.search_var.set("")
        self._display_data(self._all_data)
        self.status_label.config(text=f"Total: {len(self._all_data)} filas")

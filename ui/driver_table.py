"""
Driver Table Component
Per-driver payroll rows with an inline penalty editor for the selected driver.
"""

import tkinter as tk
import tkinter.ttk as ttk
from persistence import format_price
from .styles import COLORS, SPACING, FONTS, DIMENSIONS, TABLE_COLUMNS

class DriverTableComponent:
    """Treeview of payroll rows plus a totals line and a penalty entry"""

    def __init__(self, parent, penalty_callback, format_amount):
        self.parent = parent
        self.penalty_callback = penalty_callback
        self.format_amount = format_amount
        self.frame = None
        self.tree = None
        self.penalty_var = tk.StringVar()
        self.selected_label = None
        self.penalty_entry = None
        self.apply_button = None
        self._penalties = {}

    def create(self):
        self.frame = tk.Frame(self.parent, bg=COLORS['BACKGROUND_WHITE'], relief='ridge', bd=1)
        self.frame.columnconfigure(0, weight=1)
        self.frame.rowconfigure(0, weight=1)

        column_ids = [column[0] for column in TABLE_COLUMNS]
        self.tree = ttk.Treeview(self.frame, columns=column_ids, show='headings',
                                 height=DIMENSIONS['TABLE_HEIGHT'], selectmode='browse')
        for column_id, heading, width, anchor in TABLE_COLUMNS:
            self.tree.heading(column_id, text=heading)
            self.tree.column(column_id, width=width, anchor=anchor)
        self.tree.tag_configure('total', font=FONTS['BODY_BOLD'], background=COLORS['BACKGROUND_LIGHT'])
        self.tree.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        scrollbar = ttk.Scrollbar(self.frame, orient='vertical', command=self.tree.yview)
        scrollbar.grid(row=0, column=1, sticky=(tk.N, tk.S))
        self.tree.configure(yscrollcommand=scrollbar.set)
        self.tree.bind('<<TreeviewSelect>>', self._on_select)

        editor = tk.Frame(self.frame, bg=COLORS['BACKGROUND_WHITE'])
        editor.grid(row=1, column=0, columnspan=2, sticky=(tk.W, tk.E), padx=SPACING['LARGE'], pady=SPACING['MEDIUM'])

        self.selected_label = tk.Label(editor, text="Select a driver to enter a penalty",
                                       font=FONTS['BODY'], fg=COLORS['TEXT_SECONDARY'],
                                       bg=COLORS['BACKGROUND_WHITE'])
        self.selected_label.pack(side='left')

        self.apply_button = ttk.Button(editor, text="Apply", command=self._apply, state='disabled')
        self.apply_button.pack(side='right')

        self.penalty_entry = tk.Entry(editor, textvariable=self.penalty_var,
                                      width=DIMENSIONS['PENALTY_ENTRY_WIDTH'], justify='right',
                                      font=FONTS['BODY'], fg=COLORS['ERROR_RED'], state='disabled')
        self.penalty_entry.pack(side='right', padx=SPACING['MEDIUM'])
        self.penalty_entry.bind('<Return>', lambda event: self._apply())

        return self.frame

    def populate(self, summary, penalties):
        """Replace the rows with the given PayrollSummary"""
        selected = self.selected_driver()
        self._penalties = dict(penalties)
        self.tree.delete(*self.tree.get_children())

        for row in summary.rows:
            self.tree.insert('', 'end', iid=f"driver:{row.name}", values=(
                row.name,
                row.tour_count,
                self.format_amount(row.gross_pay),
                self.format_amount(row.penalty),
                self.format_amount(row.net_pay),
            ))

        if summary.rows:
            self.tree.insert('', 'end', iid='total', tags=('total',), values=(
                'TOTAL',
                summary.total_tours,
                self.format_amount(summary.total_gross),
                f"-{self.format_amount(summary.total_penalties)}",
                self.format_amount(summary.total_payout),
            ))

        if selected and self.tree.exists(f"driver:{selected}"):
            self.tree.selection_set(f"driver:{selected}")
        else:
            self._set_editor(None)

    def selected_driver(self):
        if not self.tree:
            return None
        selection = self.tree.selection()
        if not selection or not selection[0].startswith('driver:'):
            return None
        return selection[0][len('driver:'):]

    def _on_select(self, event=None):
        self._set_editor(self.selected_driver())

    def _set_editor(self, driver):
        if driver is None:
            self.selected_label.config(text="Select a driver to enter a penalty")
            self.penalty_var.set('')
            self.penalty_entry.config(state='disabled')
            self.apply_button.config(state='disabled')
            return
        amount = self._penalties.get(driver, 0)
        self.selected_label.config(text=f"Penalty for {driver}:")
        self.penalty_var.set(format_price(amount) if amount else '')
        self.penalty_entry.config(state='normal')
        self.apply_button.config(state='normal')

    def _apply(self):
        driver = self.selected_driver()
        if driver is not None:
            self.penalty_callback(driver, self.penalty_var.get())

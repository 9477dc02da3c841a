"""
Driver Payroll - desktop application
Import a tour export, review tours per driver, enter penalties and export the payroll.
"""
import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from pathlib import Path

from config import payroll_config
from errors import PayrollError
from export_formatter import build_export_document, write_workbook
from logger_config import gui_logger
from payroll_calculator import format_currency
from payroll_controller import PayrollController, describe_error
from persistence import JsonFileStore, PersistenceAdapter, default_state_path, format_price
from ui import (COLORS, FONTS, SPACING, DIMENSIONS,
                FileInputComponent, SummaryCardsComponent, DriverTableComponent)


class PayrollAppGUI:
    def __init__(self, root, controller=None):
        self.root = root
        self.root.title("Driver Payroll")
        self.root.geometry("980x720")
        self.root.configure(bg=COLORS['BACKGROUND_GRAY'])
        self.root.minsize(860, 600)

        self.logger = gui_logger
        if controller is None:
            controller = PayrollController(PersistenceAdapter(JsonFileStore(default_state_path())))
        self.controller = controller
        self.controller.add_listener(self.on_state_change)

        self.is_importing = False
        self._saved_after_id = None

        self.setup_styles()
        self.create_widgets()
        self.refresh()
        self.center_window()

    def setup_styles(self):
        """Setup modern styling for the application"""
        style = ttk.Style()
        style.theme_use('clam')

        style.configure('Title.TLabel',
                       font=FONTS['TITLE'],
                       foreground=COLORS['PRIMARY_INDIGO'],
                       background=COLORS['BACKGROUND_WHITE'])
        style.configure('Header.TLabel',
                       font=FONTS['HEADER'],
                       foreground=COLORS['TEXT_PRIMARY'],
                       background=COLORS['BACKGROUND_GRAY'])
        style.configure('Browse.TButton',
                       font=FONTS['BODY'],
                       background=COLORS['PRIMARY_INDIGO'],
                       foreground='white',
                       borderwidth=0,
                       focuscolor='none',
                       padding=(15, 6))
        style.map('Browse.TButton',
                 background=[('active', COLORS['PRIMARY_INDIGO_HOVER']), ('disabled', '#a0aec0')])
        style.configure('Export.TButton',
                       font=FONTS['BODY_BOLD'],
                       background=COLORS['SUCCESS_GREEN'],
                       foreground='white',
                       borderwidth=0,
                       focuscolor='none',
                       padding=(15, 6))
        style.map('Export.TButton', background=[('active', '#2f855a')])
        style.configure('Reset.TButton',
                       font=FONTS['BODY'],
                       padding=(15, 6))

    def create_widgets(self):
        """Create the main GUI widgets"""
        main_frame = tk.Frame(self.root, bg=COLORS['BACKGROUND_GRAY'])
        main_frame.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S), padx=SPACING['LARGE'], pady=SPACING['LARGE'])
        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)
        main_frame.columnconfigure(0, weight=1)
        main_frame.rowconfigure(3, weight=1)

        # Header: title, saved badge, price per tour
        header = tk.Frame(main_frame, bg=COLORS['BACKGROUND_WHITE'], relief='ridge', bd=1)
        header.grid(row=0, column=0, sticky=(tk.W, tk.E), pady=(0, SPACING['MEDIUM']))
        header.columnconfigure(0, weight=1)

        ttk.Label(header, text="Driver Payroll", style='Title.TLabel').grid(
            row=0, column=0, sticky=tk.W, padx=SPACING['LARGE'], pady=SPACING['MEDIUM'])

        self.saved_label = tk.Label(header, text="", font=FONTS['SMALL'],
                                    fg='white', bg=COLORS['BACKGROUND_WHITE'])
        self.saved_label.grid(row=0, column=1, padx=SPACING['MEDIUM'])

        price_frame = tk.Frame(header, bg=COLORS['PRIMARY_INDIGO_LIGHT'])
        price_frame.grid(row=0, column=2, padx=SPACING['LARGE'], pady=SPACING['MEDIUM'])
        tk.Label(price_frame, text="Price per tour:", font=FONTS['BODY_BOLD'],
                 fg=COLORS['PRIMARY_INDIGO'], bg=COLORS['PRIMARY_INDIGO_LIGHT']).pack(
                     side='left', padx=(SPACING['MEDIUM'], SPACING['SMALL']), pady=SPACING['MEDIUM'])
        self.price_var = tk.StringVar()
        self.price_entry = tk.Entry(price_frame, textvariable=self.price_var, justify='right',
                                    width=DIMENSIONS['PRICE_ENTRY_WIDTH'], font=FONTS['BODY_BOLD'])
        self.price_entry.pack(side='left', padx=(0, SPACING['MEDIUM']))
        self.price_entry.bind('<Return>', self.on_price_entered)
        self.price_entry.bind('<FocusOut>', self.on_price_entered)

        # Import section
        self.file_input = FileInputComponent(
            main_frame, self.browse_file, payroll_config.get('data_structure.expected_columns'))
        self.file_input.create().grid(row=1, column=0, sticky=(tk.W, tk.E), pady=(0, SPACING['MEDIUM']))

        # Totals cards
        self.cards = SummaryCardsComponent(main_frame)
        self.cards.create().grid(row=2, column=0, sticky=(tk.W, tk.E), pady=(0, SPACING['MEDIUM']))

        # Driver table
        self.table = DriverTableComponent(main_frame, self.on_penalty_entered, format_currency)
        self.table.create().grid(row=3, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        # Actions
        actions = tk.Frame(main_frame, bg=COLORS['BACKGROUND_GRAY'])
        actions.grid(row=4, column=0, sticky=(tk.W, tk.E), pady=(SPACING['MEDIUM'], 0))
        self.note_label = tk.Label(actions, text="", font=FONTS['SMALL'], fg=COLORS['TEXT_MUTED'],
                                   bg=COLORS['BACKGROUND_GRAY'], justify='left')
        self.note_label.pack(side='left')
        ttk.Button(actions, text="Reset", command=self.reset, style='Reset.TButton').pack(side='right')
        ttk.Button(actions, text="Export", command=self.export, style='Export.TButton').pack(
            side='right', padx=SPACING['MEDIUM'])

        # Error area
        self.error_label = tk.Label(main_frame, text="", font=FONTS['BODY'], fg=COLORS['ERROR_RED'],
                                    bg=COLORS['BACKGROUND_GRAY'], justify='left', anchor='w')
        self.error_label.grid(row=5, column=0, sticky=(tk.W, tk.E), pady=(SPACING['MEDIUM'], 0))

    def center_window(self):
        """Center the window on screen"""
        self.root.update_idletasks()
        width = self.root.winfo_width()
        height = self.root.winfo_height()
        x = (self.root.winfo_screenwidth() // 2) - (width // 2)
        y = (self.root.winfo_screenheight() // 2) - (height // 2)
        self.root.geometry(f'{width}x{height}+{x}+{y}')

    # -------- State display --------

    def on_state_change(self, state):
        """Controller listener: redraw and flash the saved badge"""
        self.refresh()
        self.show_saved_badge()

    def refresh(self):
        state = self.controller.state
        summary = self.controller.summary()

        if self.root.focus_get() is not self.price_entry:
            self.price_var.set(format_price(state.price_per_tour))

        self.file_input.update_file_display(state.file_name)
        self.cards.update({
            'total_tours': str(summary.total_tours),
            'total_penalties': format_currency(summary.total_penalties),
            'total_payout': format_currency(summary.total_payout),
        })
        self.table.populate(summary, state.penalties)

        orphans = self.controller.orphan_penalties()
        if orphans:
            names = ', '.join(sorted(orphans))
            self.note_label.config(text=f"Total penalties include drivers without tours in this file: {names}")
        else:
            self.note_label.config(text="")

    def show_saved_badge(self):
        self.saved_label.config(text=" Saved ", bg=COLORS['SUCCESS_GREEN'])
        if self._saved_after_id is not None:
            self.root.after_cancel(self._saved_after_id)
        self._saved_after_id = self.root.after(DIMENSIONS['SAVED_BADGE_MS'], self._hide_saved_badge)

    def _hide_saved_badge(self):
        self._saved_after_id = None
        self.saved_label.config(text="", bg=COLORS['BACKGROUND_WHITE'])

    def show_error(self, message):
        self.error_label.config(text=message)

    def clear_error(self):
        self.error_label.config(text="")

    # -------- User actions --------

    def on_price_entered(self, event=None):
        value = self.price_var.get()
        if value.strip() == format_price(self.controller.state.price_per_tour):
            return
        self.controller.set_price(value)

    def on_penalty_entered(self, driver, value):
        self.controller.set_penalty(driver, value)

    def browse_file(self):
        """Pick a tour file and read it in the background"""
        if self.is_importing:
            return

        file_path = filedialog.askopenfilename(
            title="Select tour file",
            filetypes=[("Tour files", "*.xlsx *.xls *.csv"), ("Excel files", "*.xlsx *.xls"),
                       ("CSV files", "*.csv"), ("All files", "*.*")]
        )
        if not file_path:
            return

        self.clear_error()
        self.is_importing = True
        self.file_input.set_busy(True)
        self.logger.info("Import requested", file=file_path)
        # The worker thread must not touch Tk; hand the result back to the event loop
        self.controller.import_file_async(
            file_path, lambda result: self.root.after(0, lambda: self._on_file_decoded(result)))

    def _on_file_decoded(self, result):
        self.is_importing = False
        self.file_input.set_busy(False)
        try:
            self.controller.apply_decode_result(result)
        except PayrollError as e:
            self.logger.warning(f"Import failed: {e.user_message()}", file=result.file_name)
            self.show_error(describe_error(e))

    def export(self):
        """Write the payroll workbook to a location picked by the user"""
        state = self.controller.state
        document = build_export_document(self.controller.driver_stats, state.price_per_tour, state.penalties)

        target = filedialog.asksaveasfilename(
            title="Export payroll",
            initialfile=document.file_name,
            defaultextension=".xlsx",
            filetypes=[("Excel files", "*.xlsx")]
        )
        if not target:
            return

        target_path = Path(target)
        document.file_name = target_path.name
        try:
            output_path = write_workbook(document, str(target_path.parent))
        except PayrollError as e:
            self.show_error(describe_error(e))
            return
        except OSError as e:
            self.show_error(f"Could not write the export file:\n{e}")
            return

        self.clear_error()
        messagebox.showinfo("Export Complete", f"Payroll exported to:\n{output_path}")

    def reset(self):
        if messagebox.askyesno("Reset", "Are you sure you want to clear all imported data and penalties?"):
            self.clear_error()
            self.controller.reset()


def main():
    root = tk.Tk()
    app = PayrollAppGUI(root)
    root.mainloop()

if __name__ == "__main__":
    main()

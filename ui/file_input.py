"""
File Input Component
Import button, current file name and the expected column layout.
"""

import tkinter as tk
import tkinter.ttk as ttk
from .styles import COLORS, SPACING, FONTS

class FileInputComponent:
    """Import section showing the last imported file"""

    def __init__(self, parent, browse_callback, expected_columns):
        self.parent = parent
        self.browse_callback = browse_callback
        self.expected_columns = expected_columns
        self.file_section = None
        self.file_label = None
        self.browse_button = None

    def create(self):
        """Create the file input UI section"""
        self.file_section = tk.Frame(self.parent, bg=COLORS['BACKGROUND_GRAY'])
        self.file_section.columnconfigure(0, weight=1)

        ttk.Label(
            self.file_section,
            text="Import Excel (.xlsx) or CSV file",
            style='Header.TLabel'
        ).grid(row=0, column=0, sticky=tk.W, pady=(SPACING['MEDIUM'], 2), padx=SPACING['LARGE'])

        tk.Label(
            self.file_section,
            text=f"Expected columns: {', '.join(self.expected_columns)}",
            font=FONTS['SMALL'],
            fg=COLORS['TEXT_MUTED'],
            bg=COLORS['BACKGROUND_GRAY']
        ).grid(row=1, column=0, sticky=tk.W, padx=SPACING['LARGE'])

        self.file_label = tk.Label(
            self.file_section,
            text="No file imported",
            font=FONTS['BODY'],
            fg=COLORS['TEXT_MUTED'],
            bg=COLORS['BACKGROUND_WHITE'],
            anchor='w',
            padx=SPACING['MEDIUM'],
            pady=SPACING['SMALL']
        )
        self.file_label.grid(row=2, column=0, sticky=(tk.W, tk.E), padx=(SPACING['LARGE'], SPACING['MEDIUM']),
                             pady=SPACING['MEDIUM'])

        self.browse_button = ttk.Button(
            self.file_section,
            text="Browse...",
            command=self.browse_callback,
            style='Browse.TButton'
        )
        self.browse_button.grid(row=2, column=1, padx=(0, SPACING['LARGE']))

        return self.file_section

    def update_file_display(self, file_name):
        """Show the imported file name, or the placeholder when there is none"""
        if not self.file_label:
            return
        if file_name:
            self.file_label.config(text=f"Imported: {file_name}", fg=COLORS['SUCCESS_GREEN'])
        else:
            self.file_label.config(text="No file imported", fg=COLORS['TEXT_MUTED'])

    def set_busy(self, busy):
        """Disable the browse button while a file is being read"""
        if self.browse_button:
            self.browse_button.config(state='disabled' if busy else 'normal')

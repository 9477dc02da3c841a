"""
Summary Cards Component
Three totals cards: tours, penalties, payout.
"""

import tkinter as tk
from .styles import COLORS, SPACING, FONTS

CARDS = [
    ('total_tours', 'TOTAL TOURS', COLORS['INFO_BLUE']),
    ('total_penalties', 'TOTAL PENALTIES', COLORS['ERROR_RED']),
    ('total_payout', 'TOTAL PAYOUT', COLORS['SUCCESS_GREEN']),
]

class SummaryCardsComponent:
    """Row of totals cards"""

    def __init__(self, parent):
        self.parent = parent
        self.frame = None
        self.value_labels = {}

    def create(self):
        self.frame = tk.Frame(self.parent, bg=COLORS['BACKGROUND_GRAY'])

        for col, (key, title, color) in enumerate(CARDS):
            self.frame.columnconfigure(col, weight=1)
            card = tk.Frame(self.frame, bg=COLORS['BACKGROUND_WHITE'], relief='ridge', bd=1)
            card.grid(row=0, column=col, sticky=(tk.W, tk.E), padx=SPACING['SMALL'], pady=SPACING['SMALL'])

            tk.Label(card, text=title, font=FONTS['CARD_LABEL'], fg=COLORS['TEXT_MUTED'],
                     bg=COLORS['BACKGROUND_WHITE']).pack(anchor='w', padx=SPACING['LARGE'], pady=(SPACING['MEDIUM'], 0))

            value = tk.Label(card, text="0", font=FONTS['CARD_VALUE'], fg=color,
                             bg=COLORS['BACKGROUND_WHITE'])
            value.pack(anchor='w', padx=SPACING['LARGE'], pady=(0, SPACING['MEDIUM']))
            self.value_labels[key] = value

        return self.frame

    def update(self, values):
        """values: card key -> display text"""
        for key, text in values.items():
            label = self.value_labels.get(key)
            if label is not None:
                label.config(text=text)

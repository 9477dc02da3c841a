"""
UI Components Package

Modular UI components for the Driver Payroll application.
"""

from .styles import COLORS, FONTS, SPACING, DIMENSIONS, TABLE_COLUMNS
from .file_input import FileInputComponent
from .summary_cards import SummaryCardsComponent
from .driver_table import DriverTableComponent

__all__ = [
    'COLORS',
    'FONTS',
    'SPACING',
    'DIMENSIONS',
    'TABLE_COLUMNS',
    'FileInputComponent',
    'SummaryCardsComponent',
    'DriverTableComponent'
]

__version__ = "1.0.0"

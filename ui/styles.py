"""
UI Styles and Constants
Centralized styling configuration for consistent theming across the application.
"""

# Color Palette
COLORS = {
    # Primary colors
    'PRIMARY_INDIGO': '#4338ca',
    'PRIMARY_INDIGO_HOVER': '#3730a3',
    'PRIMARY_INDIGO_LIGHT': '#eef2ff',

    # Background colors
    'BACKGROUND_WHITE': '#ffffff',
    'BACKGROUND_GRAY': '#f8f9fa',
    'BACKGROUND_LIGHT': '#f7fafc',
    'BACKGROUND_BORDER': '#e2e8f0',

    # Text colors
    'TEXT_PRIMARY': '#2d3748',
    'TEXT_SECONDARY': '#4a5568',
    'TEXT_MUTED': '#718096',

    # Status colors
    'SUCCESS_GREEN': '#38a169',
    'SUCCESS_LIGHT': '#e6fffa',
    'ERROR_RED': '#e53e3e',
    'ERROR_LIGHT': '#fff5f5',
    'INFO_BLUE': '#3182ce',
}

# Typography
FONTS = {
    'TITLE': ('Segoe UI', 18, 'bold'),
    'HEADER': ('Segoe UI', 11, 'bold'),
    'BODY': ('Segoe UI', 10),
    'BODY_BOLD': ('Segoe UI', 10, 'bold'),
    'SMALL': ('Segoe UI', 9),
    'CARD_VALUE': ('Segoe UI', 20, 'bold'),
    'CARD_LABEL': ('Segoe UI', 9, 'bold'),
}

# Spacing
SPACING = {
    'SMALL': 4,
    'MEDIUM': 8,
    'LARGE': 15,
    'XLARGE': 20,
}

# Component Dimensions
DIMENSIONS = {
    'PRICE_ENTRY_WIDTH': 10,
    'PENALTY_ENTRY_WIDTH': 12,
    'TABLE_HEIGHT': 14,
    'SAVED_BADGE_MS': 1000,
}

# Driver table columns: (id, heading, width, anchor)
TABLE_COLUMNS = [
    ('driver', 'Driver', 260, 'w'),
    ('tours', 'Tour Count', 110, 'center'),
    ('gross', 'Gross Amount', 140, 'e'),
    ('penalty', 'Penalties', 130, 'e'),
    ('net', 'Net Payable', 150, 'e'),
]

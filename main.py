#!/usr/bin/env python3
"""
Driver Payroll - Main Entry Point

Starts the desktop application.
"""

import sys


def main():
    """Main entry point for Driver Payroll"""
    try:
        from payroll_app import main as run_gui
        print("Starting Driver Payroll")
        run_gui()

    except ImportError as e:
        print(f"Failed to import required modules: {e}")
        print("Please ensure all dependencies are installed:")
        print("pip install pandas openpyxl numpy")
        sys.exit(1)

if __name__ == "__main__":
    main()

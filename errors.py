"""
Failure types for importing and exporting payroll data
Each error carries the message shown to the user.
"""
from typing import List, Optional


class PayrollError(Exception):
    """Base class for all user-facing payroll failures"""

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def user_message(self) -> str:
        return self.message


class DecodeError(PayrollError):
    """The file could not be read or decoded into rows"""

    def __init__(self, file_name: str, detail: Optional[str] = None):
        super().__init__(f"Could not read the file {file_name}.", detail)
        self.file_name = file_name


class EmptyImportError(PayrollError):
    """The file was decoded but no usable tour rows were found"""

    def __init__(self, expected_columns: List[str]):
        columns = ", ".join(expected_columns)
        super().__init__(
            f"No valid data found. Check that the columns are in this order: {columns}."
        )
        self.expected_columns = list(expected_columns)


class MissingDependencyError(PayrollError):
    """The spreadsheet library needed for this operation is not available"""

    def __init__(self, library: str, operation: str):
        super().__init__(
            f"The spreadsheet library ({library}) is not available for {operation}. "
            f"Install it and try again."
        )
        self.library = library
        self.operation = operation

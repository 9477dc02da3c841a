"""
Input validation for tour files
Only checks that a file can be read; column layout is handled by the row normalizer.
"""
from pathlib import Path
from typing import Tuple

from config import payroll_config
from logger_config import data_logger


class ImportValidator:
    """File-level checks run before decoding"""

    def __init__(self):
        self.logger = data_logger
        self.config = payroll_config

    def is_spreadsheet(self, file_name: str) -> bool:
        """True for extensions decoded as a workbook (.xlsx/.xls), False for delimited text"""
        extensions = self.config.get('validation.spreadsheet_extensions', ['.xlsx', '.xls'])
        return Path(file_name).suffix.lower() in [ext.lower() for ext in extensions]

    def validate_file_path(self, file_path: str) -> Tuple[bool, str]:
        """Validate file path and accessibility"""
        valid, message = self._check_file_path(Path(file_path))
        self.logger.log_validation_result("file_path", valid, message)
        return valid, message

    def _check_file_path(self, path: Path) -> Tuple[bool, str]:
        if not path.exists():
            return False, f"File does not exist: {path}"

        if not path.is_file():
            return False, f"Path is not a file: {path}"

        max_size_mb = self.config.get('validation.max_file_size_mb', 50)
        file_size_mb = path.stat().st_size / (1024 * 1024)
        if file_size_mb > max_size_mb:
            return False, f"File too large: {file_size_mb:.1f}MB (max: {max_size_mb}MB)"

        try:
            with open(path, 'rb') as test_file:
                test_file.read(1)
        except OSError:
            return False, f"File is not readable: {path}"

        return True, "File validation passed"


import_validator = ImportValidator()

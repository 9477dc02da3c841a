"""
Logging setup for Driver Payroll
Thin wrappers around the standard logging module with payroll-specific helpers
"""
import logging
import sys
from typing import Dict, Any, Optional

from config import payroll_config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _configure_root() -> None:
    """Attach console (and optional file) handlers once"""
    root = logging.getLogger('payroll')
    if root.handlers:
        return

    level_name = str(payroll_config.get('logging.level', 'INFO')).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console)

    log_file = payroll_config.get('logging.log_file')
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    root.propagate = False


class PayrollLogger:
    """Named logger with helpers for processing steps, stats and file operations"""

    def __init__(self, name: str):
        _configure_root()
        self.logger = logging.getLogger(f'payroll.{name}')

    def debug(self, msg: str, **kwargs) -> None:
        self.logger.debug(self._with_context(msg, kwargs))

    def info(self, msg: str, **kwargs) -> None:
        self.logger.info(self._with_context(msg, kwargs))

    def warning(self, msg: str, **kwargs) -> None:
        self.logger.warning(self._with_context(msg, kwargs))

    def error(self, msg: str, exception: Optional[BaseException] = None, **kwargs) -> None:
        if exception is not None:
            msg = f"{msg}: {exception}"
        self.logger.error(self._with_context(msg, kwargs), exc_info=exception)

    def log_processing_step(self, step: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log a pipeline step with optional details"""
        if details:
            self.logger.info(f"Processing: {step} | {self._format_details(details)}")
        else:
            self.logger.info(f"Processing: {step}")

    def log_data_stats(self, stats: Dict[str, Any], prefix: str = "") -> None:
        """Log a dictionary of counts/totals"""
        label = f"{prefix}: " if prefix else ""
        self.logger.info(f"{label}{self._format_details(stats)}")

    def log_file_operation(self, operation: str, file_path: str, success: bool,
                           size_bytes: Optional[int] = None) -> None:
        """Log a read/write against a file"""
        status = "OK" if success else "FAILED"
        size = f" ({size_bytes} bytes)" if size_bytes is not None else ""
        level = logging.INFO if success else logging.WARNING
        self.logger.log(level, f"File {operation} {status}: {file_path}{size}")

    def log_validation_result(self, check: str, passed: bool, message: str = "") -> None:
        level = logging.INFO if passed else logging.WARNING
        self.logger.log(level, f"Validation [{check}] {'passed' if passed else 'failed'}: {message}")

    def log_performance(self, operation: str, duration: float, records: Optional[int] = None) -> None:
        if records is not None:
            self.logger.debug(f"{operation}: {duration:.3f}s for {records} records")
        else:
            self.logger.debug(f"{operation}: {duration:.3f}s")

    @staticmethod
    def _format_details(details: Dict[str, Any]) -> str:
        return ", ".join(f"{key}={value}" for key, value in details.items())

    def _with_context(self, msg: str, context: Dict[str, Any]) -> str:
        if not context:
            return msg
        return f"{msg} | {self._format_details(context)}"


main_logger = PayrollLogger('main')
data_logger = PayrollLogger('data')
gui_logger = PayrollLogger('gui')

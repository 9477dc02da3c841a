"""
Configuration management for Driver Payroll
"""
import copy
import json
from pathlib import Path
from typing import Dict, Any, List
import logging

class PayrollConfig:
    """Configuration management for Driver Payroll"""

    # Default configuration
    DEFAULT_CONFIG = {
        'pricing': {
            'default_price_per_tour': 80.0
        },
        'data_structure': {
            'min_columns': 4,
            'expected_columns': ['Date', 'Warehouse', 'Tour', 'Driver']
        },
        'storage': {
            'state_file': 'payroll_state.json',
            'keys': {
                'records': 'driverApp_records',
                'price': 'driverApp_tourPrice',
                'penalties': 'driverApp_penalties',
                'file_name': 'driverApp_fileName'
            }
        },
        'formatting': {
            'currency_format': '#,##0.00" €"',
            'currency_symbol': '€',
            'column_widths': [30, 15, 15, 15, 15],
            'headers': ['Driver', 'Tour Count', 'Gross Amount', 'Penalties', 'Net Payable'],
            'total_label': 'TOTAL',
            'export_prefix': 'Payroll_Summary_',
            'sheet_name': 'Payroll Summary'
        },
        'validation': {
            'spreadsheet_extensions': ['.xlsx', '.xls'],
            'max_file_size_mb': 50
        },
        'logging': {
            'level': 'INFO',
            'log_file': None
        }
    }

    def __init__(self, config_file: str = None):
        self.config_file = config_file or 'payroll_config.json'
        self.config = self.load_config()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file, falling back to defaults"""
        config_path = Path(self.config_file)

        if config_path.exists():
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    config = json.load(f)
                # Merge with defaults to ensure all keys exist
                return self._merge_configs(self.DEFAULT_CONFIG, config)
            except (json.JSONDecodeError, IOError) as e:
                logging.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
        return copy.deepcopy(self.DEFAULT_CONFIG)

    def save_config(self, config: Dict[str, Any] = None) -> None:
        """Save configuration to file"""
        config = config or self.config
        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2, ensure_ascii=False)
        except IOError as e:
            logging.error(f"Failed to save config to {self.config_file}: {e}")

    def get(self, key_path: str, default=None):
        """Get configuration value using dot notation (e.g., 'pricing.default_price_per_tour')"""
        keys = key_path.split('.')
        value = self.config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key_path: str, value: Any) -> None:
        """Set configuration value using dot notation"""
        keys = key_path.split('.')
        config = self.config

        # Navigate to the parent of the target key
        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]

        config[keys[-1]] = value

    def _merge_configs(self, default: Dict, custom: Dict) -> Dict:
        """Recursively merge custom config with defaults"""
        result = copy.deepcopy(default)

        for key, value in custom.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def validate_config(self) -> List[str]:
        """Validate configuration and return list of issues"""
        issues = []

        required_sections = ['pricing', 'data_structure', 'storage', 'formatting']
        for section in required_sections:
            if section not in self.config:
                issues.append(f"Missing required section: {section}")

        numeric_checks = [
            ('pricing.default_price_per_tour', 0, 1000000),
            ('data_structure.min_columns', 1, 100),
            ('validation.max_file_size_mb', 1, 1000)
        ]

        for key_path, min_val, max_val in numeric_checks:
            value = self.get(key_path)
            if value is not None and not (min_val <= value <= max_val):
                issues.append(f"{key_path} must be between {min_val} and {max_val}, got {value}")

        widths = self.get('formatting.column_widths', [])
        headers = self.get('formatting.headers', [])
        if len(widths) != len(headers):
            issues.append(f"formatting.column_widths has {len(widths)} entries for {len(headers)} headers")

        return issues

    def reset_to_defaults(self) -> None:
        """Reset configuration to defaults"""
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.save_config()

# Global configuration instance
payroll_config = PayrollConfig()

#!/usr/bin/env python3
"""
Persistence of the payroll state in a string key-value store

Four keys are written on every change: the tour records (JSON), the price per
tour (number text), the penalty map (JSON) and the source file name. Each key
is read back on its own so one damaged entry never discards the others.
"""

import json
import math
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from config import payroll_config
from logger_config import data_logger
from models import AppState, TourRecord
from payroll_calculator import parse_penalty
from row_normalizer import coerce_cell


class KeyValueStore(ABC):
    """Minimal string store: get / set / remove"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass


class MemoryStore(KeyValueStore):
    """In-process store, used by tests and one-shot CLI runs"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """
    Store backed by a single JSON object on disk.
    The whole file is rewritten on every set/remove.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.data: Dict[str, str] = self._read()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            data_logger.warning(f"Could not read state file, starting empty: {e}", file=str(self.path))
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(key): value for key, value in data.items() if isinstance(value, str)}

    def _write(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(self.data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            data_logger.error("Failed to write state file", exception=e, file=str(self.path))
            raise
        data_logger.log_file_operation("write", str(self.path), True, self.path.stat().st_size)

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
        self._write()

    def remove(self, key: str) -> None:
        if key in self.data:
            del self.data[key]
            self._write()


def default_state_path() -> Path:
    """State file location in the user's home directory"""
    return Path.home() / '.driver_payroll' / payroll_config.get('storage.state_file', 'payroll_state.json')


def format_price(price: float) -> str:
    """Number text for the price: '80' for whole amounts, '82.5' otherwise"""
    value = float(price)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class PersistenceAdapter:
    """Serializes AppState into a KeyValueStore and reads it back"""

    def __init__(self, store: KeyValueStore, keys: Optional[Dict[str, str]] = None,
                 default_price: Optional[float] = None):
        self.store = store
        self.keys = dict(payroll_config.get('storage.keys'))
        if keys:
            self.keys.update(keys)
        if default_price is None:
            default_price = payroll_config.get('pricing.default_price_per_tour', 80.0)
        self.default_price = float(default_price)

    # -------- Saving --------

    def save_state(self, state: AppState) -> None:
        """Write all four keys; the file name key is removed when there is no file"""
        records_blob = json.dumps([record.to_dict() for record in state.records], ensure_ascii=False)
        penalties_blob = json.dumps(
            {name: float(amount) for name, amount in state.penalties.items()}, ensure_ascii=False
        )

        self.store.set(self.keys['records'], records_blob)
        self.store.set(self.keys['price'], format_price(state.price_per_tour))
        self.store.set(self.keys['penalties'], penalties_blob)
        if state.file_name:
            self.store.set(self.keys['file_name'], state.file_name)
        else:
            self.store.remove(self.keys['file_name'])

        data_logger.debug("State saved", records=len(state.records), penalties=len(state.penalties))

    # -------- Loading --------

    def load_state(self) -> AppState:
        """Read every key independently, falling back to its default when missing or damaged"""
        state = AppState(
            records=self._load_records(),
            price_per_tour=self._load_price(),
            penalties=self._load_penalties(),
            file_name=self.store.get(self.keys['file_name']) or None
        )
        data_logger.log_data_stats({
            'records': len(state.records),
            'price_per_tour': state.price_per_tour,
            'penalties': len(state.penalties),
            'file_name': state.file_name
        }, "STATE_LOADED")
        return state

    def _load_json(self, key: str) -> Any:
        raw = self.store.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            data_logger.warning(f"Ignoring unreadable saved value for {key}: {e}")
            return None

    def _load_records(self) -> List[TourRecord]:
        data = self._load_json(self.keys['records'])
        if not isinstance(data, list):
            return []
        records: List[TourRecord] = []
        for item in data:
            if not isinstance(item, dict):
                continue
            records.append(
                TourRecord(
                    date=coerce_cell(item.get('date')),
                    warehouse=coerce_cell(item.get('warehouse')),
                    tour_id=coerce_cell(item.get('tourId')),
                    driver=coerce_cell(item.get('driver')),
                )
            )
        return records

    def _load_price(self) -> float:
        raw = self.store.get(self.keys['price'])
        if raw is None:
            return self.default_price
        try:
            price = float(raw)
        except ValueError:
            data_logger.warning(f"Ignoring unreadable saved price: {raw!r}")
            return self.default_price
        if math.isnan(price) or math.isinf(price):
            return self.default_price
        return price

    def _load_penalties(self) -> Dict[str, float]:
        data = self._load_json(self.keys['penalties'])
        if not isinstance(data, dict):
            return {}
        return {str(name): parse_penalty(amount) for name, amount in data.items()}

    # -------- Reset --------

    def clear(self) -> None:
        """Forget records, penalties and file name; the price is kept"""
        self.store.remove(self.keys['records'])
        self.store.remove(self.keys['file_name'])
        self.store.remove(self.keys['penalties'])

    def snapshot(self) -> Dict[str, Optional[str]]:
        """Raw stored strings for the four keys"""
        return {name: self.store.get(key) for name, key in self.keys.items()}

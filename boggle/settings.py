import os
from dataclasses import dataclass


@dataclass
class Settings:
    MIN_WORD_LENGTH: int = 3
    MAX_RESULTS: int = 0  # 0 = return every word found
    PRESORTED_WORDS: bool = True

    MAX_BOARD_CELLS: int = 400
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    def __post_init__(self):
        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                setattr(self, fld, _coerce(env_val, type(current)))


# Fields that may be changed while the service is running
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "MAX_RESULTS": int,
    "PRESORTED_WORDS": bool,
    "MAX_BOARD_CELLS": int,
    "DEBUG": bool,
}


def _coerce(value, target: type):
    if issubclass(target, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes")
        raise ValueError(f"expected bool, got {value!r}")
    if issubclass(target, int):
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"expected int, got {value!r}")
        return int(value)
    if issubclass(target, float):
        return float(value)
    return str(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to *cfg*. Returns {field: error} for rejected ones."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "not an editable setting"
            continue
        try:
            coerced = _coerce(value, EDITABLE_FIELDS[name])
        except (TypeError, ValueError) as e:
            errors[name] = str(e)
            continue
        if name == "MIN_WORD_LENGTH" and coerced < 1:
            errors[name] = "must be at least 1"
            continue
        if name in ("MAX_RESULTS", "MAX_BOARD_CELLS") and coerced < 0:
            errors[name] = "must not be negative"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()

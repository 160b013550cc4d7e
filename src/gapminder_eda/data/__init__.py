"""Dataset loading, inspection, error injection and repair."""

from .errors import plant_decimal_comma, to_decimal_comma
from .inspect import scan_dataset
from .load import load_gapminder, value_kind
from .repair import (
    RepairResult,
    locate_coercion_failures,
    repair_known_content,
    repair_known_location,
    repair_unknown,
)

__all__ = [
    "load_gapminder",
    "value_kind",
    "scan_dataset",
    "plant_decimal_comma",
    "to_decimal_comma",
    "RepairResult",
    "locate_coercion_failures",
    "repair_known_location",
    "repair_known_content",
    "repair_unknown",
]

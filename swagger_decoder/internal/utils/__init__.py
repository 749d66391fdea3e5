"""Утилиты для декодеров"""

from .names import (
    camel_case,
    normalize_name,
    process_method_name,
    path_to_method_name,
    unique_name,
)
from .version import satisfies

__all__ = [
    "camel_case",
    "normalize_name",
    "process_method_name",
    "path_to_method_name",
    "unique_name",
    "satisfies",
]

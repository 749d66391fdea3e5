"""Проверка версии спецификации на соответствие диапазону"""

import re
from typing import Optional, Tuple

_VERSION_RE = re.compile(r"^\s*v?(\d+)(?:\.(\d+))?(?:\.(\d+))?")
_X_RANGE_RE = re.compile(r"^(\d+)\.[xX*]$")
_CARET_RANGE_RE = re.compile(r"^\^(\d+)(?:\.(\d+))?(?:\.(\d+))?$")


def coerce_version(version) -> Optional[Tuple[int, int, int]]:
    """Разбор нестрогой версии ("2.0", "1.2", "v3") в кортеж (major, minor, patch)"""
    if not isinstance(version, str):
        return None

    match = _VERSION_RE.match(version)
    if not match:
        return None

    return tuple(int(part) if part else 0 for part in match.groups())


def satisfies(version, version_range: str) -> bool:
    """
    Проверка версии на соответствие диапазону.

    Поддерживаются диапазоны вида "1.x" и "^2.0".

    Examples:
        >>> satisfies("1.2", "1.x")
        True
        >>> satisfies("2.0", "^2.0")
        True
        >>> satisfies("3.0.0", "^2.0")
        False
    """
    parsed = coerce_version(version)
    if parsed is None:
        return False

    match = _X_RANGE_RE.match(version_range)
    if match:
        return parsed[0] == int(match.group(1))

    match = _CARET_RANGE_RE.match(version_range)
    if match:
        lower = tuple(int(part) if part else 0 for part in match.groups())
        return parsed[0] == lower[0] and parsed >= lower

    raise ValueError(f"Неподдерживаемый диапазон версий: {version_range}")

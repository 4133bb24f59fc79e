"""
Structural differ for decoded JSON-like trees.

Walks two values in lock-step, depth first, and returns one message per
divergence, prefixed with the path where it occurs (``a.b[1]``; the empty
path renders as ``root``).
"""
from collections.abc import Mapping
from enum import Enum
from typing import Any, List, Optional

from .exceptions import MaxDepthExceeded
from .settings import settings


class JsonKind(Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"


SCALAR_KINDS = (JsonKind.NUMBER, JsonKind.BOOLEAN)


def kind_of(value: Any) -> JsonKind:
    # bool before int, it is an int subclass
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, Mapping):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def _label(path: str) -> str:
    return path or "root"


def _key_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _scalar_text(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def find_json_differences(
    value1: Any,
    value2: Any,
    indent: str = "",
    path: str = "",
    max_depth: Optional[int] = None,
) -> List[str]:
    """
    Compare two JSON-like values and describe where they differ.

    Returns an empty list when the trees are equal. Object keys are visited
    in sorted order, so the output is deterministic. Arrays of different
    length report the length and then compare only the overlapping prefix.

    Raises MaxDepthExceeded when the trees nest deeper than ``max_depth``
    (``settings.diff_max_depth`` by default).
    """
    if max_depth is None:
        max_depth = settings.diff_max_depth
    return _diff(value1, value2, indent, path, 0, max_depth)


def _diff(value1, value2, indent, path, depth, max_depth) -> List[str]:
    if depth > max_depth:
        raise MaxDepthExceeded(path, max_depth)

    kind1 = kind_of(value1)
    kind2 = kind_of(value2)

    if kind1 is not kind2:
        return [f"{indent}Type mismatch at {_label(path)}: {kind1.value} vs {kind2.value}"]

    if kind1 is JsonKind.NULL:
        return []

    if kind1 is JsonKind.STRING:
        if value1 == value2:
            return []
        return [
            f"{indent}Value differs at {_label(path)}:",
            f"{indent}  TX1: {value1}",
            f"{indent}  TX2: {value2}",
        ]

    if kind1 in SCALAR_KINDS:
        # identity first, NaN is not equal to itself
        if value1 is value2 or value1 == value2:
            return []
        return [
            f"{indent}Value differs at {_label(path)}: "
            f"{_scalar_text(value1)} vs {_scalar_text(value2)}"
        ]

    if kind1 is JsonKind.ARRAY:
        diffs = []
        if len(value1) != len(value2):
            diffs.append(
                f"{indent}Array length differs at {_label(path)}: "
                f"{len(value1)} vs {len(value2)}"
            )
        for i in range(min(len(value1), len(value2))):
            diffs += _diff(value1[i], value2[i], indent, f"{path}[{i}]", depth + 1, max_depth)
        return diffs

    diffs = []
    for key in sorted(set(value1) | set(value2), key=str):
        key_path = _key_path(path, key)
        if key not in value1:
            diffs.append(f"{indent}Missing in TX1: {key_path}")
        elif key not in value2:
            diffs.append(f"{indent}Missing in TX2: {key_path}")
        else:
            diffs += _diff(value1[key], value2[key], indent, key_path, depth + 1, max_depth)
    return diffs

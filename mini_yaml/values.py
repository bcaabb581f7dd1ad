from __future__ import annotations

"""Node shapes built by :class:`mini_yaml.parser.Parser`."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Union


@dataclass(frozen=True)
class Scalar:
    """A top-level ``key: value`` line."""

    key: str
    value: str


@dataclass(frozen=True)
class Sequence:
    """A top-level key followed by an indented block of ``- item`` lines."""

    key: str
    value: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Mapping:
    """Ordered key to value association.

    Reserved for nested blocks; the current grammar never builds one.
    """

    entries: Dict[str, "Value"] = field(default_factory=dict)


Value = Union[Scalar, Sequence, Mapping]


def to_python(values: Iterable[Value]) -> Dict[str, Any]:
    """Flatten parsed entries into a plain ``dict``.

    Keys keep source order.  When a key repeats, the later entry wins.
    Only :class:`Scalar` and :class:`Sequence` entries are accepted.
    """

    result: Dict[str, Any] = {}
    for item in values:
        if isinstance(item, Scalar):
            result[item.key] = item.value
        elif isinstance(item, Sequence):
            result[item.key] = list(item.value)
        else:
            raise TypeError(f"Unsupported value: {item!r}")
    return result


__all__ = ["Scalar", "Sequence", "Mapping", "Value", "to_python"]

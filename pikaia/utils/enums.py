from __future__ import annotations

from enum import Enum


def enum_has_value(enum_cls: type[Enum], value: object) -> bool:
    """Whether some member of *enum_cls* has *value*."""
    return any(member.value == value for member in enum_cls)

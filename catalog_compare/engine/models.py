"""
Shared data model for the comparison engine.

Documents are plain JSON values as produced by ``json.loads``:
    - Container: dict[str, JsonValue]
    - Array: list[JsonValue] (always compared as one leaf)
    - Primitives: str, int, float, bool, None

A value that does not exist on one side is represented by the ``ABSENT``
sentinel, never by ``None`` (which is JSON null).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

JsonValue = Union[None, bool, int, float, str, list, dict]


class _Absent:
    """Marker type for a value missing on one side of a comparison."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> "_Absent":
        return self

    def __deepcopy__(self, memo: dict) -> "_Absent":
        return self


ABSENT: Any = _Absent()


def is_container(value: Any) -> bool:
    """Return True if value is a JSON object (arrays are leaves)."""
    return isinstance(value, dict)


class ComparisonStatus(str, Enum):
    """Classification of a key path when two documents are compared."""

    MISSING_LEFT = "missing-left"
    MISSING_RIGHT = "missing-right"
    IDENTICAL = "identical"
    DIFFERENT = "different"


class Side(str, Enum):
    """One of the two documents being compared or edited."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def other(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class EditKind(str, Enum):
    """Kind of a pending edit."""

    MODIFY = "modify"
    ADD = "add"
    DELETE = "delete"


class InvalidSideError(ValueError):
    """Raised when a side token is not 'left' or 'right'."""

    def __init__(self, side: Any) -> None:
        self.side = side
        super().__init__(f"Invalid side: {side!r}. Must be 'left' or 'right'")


def coerce_side(side: Side | str) -> Side:
    """Convert a side token into a Side, raising InvalidSideError otherwise."""
    if isinstance(side, Side):
        return side
    try:
        return Side(side)
    except ValueError:
        raise InvalidSideError(side) from None


@dataclass(frozen=True)
class ComparisonRecord:
    """One comparison unit emitted by the structural diff.

    Attributes:
        key_path: Dotted path of the compared key.
        status: Classification of the key.
        left_value: Value in the left document, or ABSENT.
        right_value: Value in the right document, or ABSENT.
    """

    key_path: str
    status: ComparisonStatus
    left_value: Any = ABSENT
    right_value: Any = ABSENT

    @property
    def has_left(self) -> bool:
        return self.left_value is not ABSENT

    @property
    def has_right(self) -> bool:
        return self.right_value is not ABSENT

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict, omitting absent values."""
        data: dict[str, Any] = {"keyPath": self.key_path, "status": self.status.value}
        if self.has_left:
            data["leftValue"] = self.left_value
        if self.has_right:
            data["rightValue"] = self.right_value
        return data


@dataclass
class TreeNode:
    """A node of the reconciled tree holding both sides' values for one path."""

    key: str
    key_path: str
    left_value: Any
    right_value: Any
    has_left: bool
    has_right: bool
    status: ComparisonStatus
    is_container: bool
    children: list["TreeNode"] = field(default_factory=list)

    def value_for(self, side: Side | str) -> Any:
        """Return the value on the given side (ABSENT if missing)."""
        return self.left_value if coerce_side(side) is Side.LEFT else self.right_value

    def has_side(self, side: Side | str) -> bool:
        return self.has_left if coerce_side(side) is Side.LEFT else self.has_right


@dataclass(frozen=True)
class EditRecord:
    """A pending mutation of one key path on one side."""

    side: Side
    key_path: str
    new_value: Any
    kind: EditKind
    timestamp: int

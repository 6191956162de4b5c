"""
Scalar node types of the document model.

Each wrapper owns one primitive and an optional comment. Comments are metadata
only: they take no part in equality and are never rendered.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, ClassVar, Optional

from ..core.constants import DECIMAL_CHUNK_DIGITS, RENDER_ESCAPE_MAP


class Kind(Enum):
    """Discriminator of the node type held by a Value."""

    UNDEFINED = "undefined"
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    DOUBLE = "double"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def render_string(text: str) -> str:
    """Render text as a double-quoted string literal."""
    return '"' + "".join(RENDER_ESCAPE_MAP.get(char, char) for char in text) + '"'


def format_int(value: int) -> str:
    """Decimal text of an integer of any size.

    str() refuses integers past the interpreter's digit limit, so large
    values are converted in fixed-size chunks.
    """
    base = 10 ** DECIMAL_CHUNK_DIGITS
    if -base < value < base:
        return str(value)

    sign = "-" if value < 0 else ""
    remaining = abs(value)
    chunks = []
    while remaining:
        remaining, chunk = divmod(remaining, base)
        chunks.append(chunk)

    head = str(chunks.pop())
    tail = "".join(
        str(chunk).zfill(DECIMAL_CHUNK_DIGITS) for chunk in reversed(chunks)
    )
    return sign + head + tail


class Node(ABC):
    """Common interface of every payload a Value can hold."""

    kind: ClassVar[Kind]
    comment: str

    @abstractmethod
    def render(self) -> str:
        """Canonical text form of this node."""

    @abstractmethod
    def copy(self) -> "Node":
        """Deep copy, comment included."""

    def release(self) -> "Node":
        """Move the contents out into a new node.

        Scalars hold immutable primitives, so moving one is a copy and the
        source stays as it was.
        """
        return self.copy()

    def __str__(self) -> str:
        return self.render()

    def __copy__(self) -> "Node":
        return self.copy()

    def __deepcopy__(self, memo: Optional[dict[int, Any]]) -> "Node":
        return self.copy()


@dataclass
class Undefined(Node):
    """The undefined placeholder, distinct from Null.

    Carries nothing but the optional comment.
    """

    comment: str = field(default="", compare=False)
    kind: ClassVar[Kind] = Kind.UNDEFINED

    def render(self) -> str:
        return "undefined"

    def copy(self) -> "Undefined":
        return replace(self)


@dataclass
class Null(Node):
    """The Null placeholder.

    Renders capitalized to keep it apart from the ``null`` input literal.
    """

    comment: str = field(default="", compare=False)
    kind: ClassVar[Kind] = Kind.NULL

    def render(self) -> str:
        return "Null"

    def copy(self) -> "Null":
        return replace(self)


@dataclass
class Bool(Node):
    """Boolean value."""

    value: bool
    comment: str = field(default="", compare=False)
    kind: ClassVar[Kind] = Kind.BOOL

    def __bool__(self) -> bool:
        return self.value

    def render(self) -> str:
        return "true" if self.value else "false"

    def copy(self) -> "Bool":
        return replace(self)


@dataclass
class Int(Node):
    """Integer value."""

    value: int
    comment: str = field(default="", compare=False)
    kind: ClassVar[Kind] = Kind.INT

    def __int__(self) -> int:
        return self.value

    def render(self) -> str:
        return format_int(self.value)

    def copy(self) -> "Int":
        return replace(self)


@dataclass
class Double(Node):
    """Floating point value."""

    value: float
    comment: str = field(default="", compare=False)
    kind: ClassVar[Kind] = Kind.DOUBLE

    def __float__(self) -> float:
        return self.value

    def render(self) -> str:
        return repr(float(self.value))

    def copy(self) -> "Double":
        return replace(self)


@dataclass
class String(Node):
    """String value."""

    value: str
    comment: str = field(default="", compare=False)
    kind: ClassVar[Kind] = Kind.STRING

    def __len__(self) -> int:
        return len(self.value)

    def render(self) -> str:
        return render_string(self.value)

    def copy(self) -> "String":
        return replace(self)

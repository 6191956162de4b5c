"""
The generic Value type: a tagged union over every document node kind.

A Value holds exactly one payload node (one of the scalar wrappers, an Array
or an Object) and its kind is the payload's kind. Every operation that
depends on the kind is a method of the payload classes, so a new kind cannot
be added without implementing all of them.

Values have value semantics. Construction and assignment copy deeply unless
``move=True`` is passed, in which case the source is emptied: a moved-from
Value is always a valid Undefined, a moved-from container is empty.
"""

from typing import Any, Optional, TypeVar

from ..security.exceptions import TypeMismatchError
from .containers import Array, Object
from .scalars import Bool, Double, Int, Kind, Node, Null, String, Undefined

NodeT = TypeVar("NodeT", bound=Node)

_MISSING = object()


def _coerce(source: Any, move: bool) -> Node:
    """Build the payload node for a Value from any accepted source."""
    if source is _MISSING:
        return Undefined()
    if isinstance(source, Value):
        return source.take()._payload if move else source._payload.copy()
    if isinstance(source, Node):
        return source.release() if move else source.copy()
    if source is None:
        return Null()
    # bool before int: bool is an int subclass
    if isinstance(source, bool):
        return Bool(source)
    if isinstance(source, int):
        return Int(source)
    if isinstance(source, float):
        return Double(source)
    if isinstance(source, str):
        return String(source)
    if isinstance(source, (list, tuple)):
        return Array(source)
    if isinstance(source, dict):
        return Object(source)
    raise TypeError(f"Cannot build a Value from {type(source).__name__}")


class Value:
    """A document node of any kind."""

    def __init__(self, source: Any = _MISSING, *, move: bool = False):
        self._payload: Node = _coerce(source, move)

    @classmethod
    def _wrap(cls, payload: Node) -> "Value":
        result = Value.__new__(Value)
        result._payload = payload
        return result

    @property
    def kind(self) -> Kind:
        """Kind of the active payload."""
        return self._payload.kind

    @property
    def comment(self) -> str:
        """Comment attached to the active payload."""
        return self._payload.comment

    @comment.setter
    def comment(self, text: str) -> None:
        self._payload.comment = text

    def as_(self, node_type: type[NodeT]) -> NodeT:
        """Return the payload typed as node_type.

        Raises TypeMismatchError when the Value holds a different kind.
        """
        if not (isinstance(node_type, type) and issubclass(node_type, Node)):
            raise TypeError(f"{node_type!r} is not a node type")
        if not isinstance(self._payload, node_type):
            raise TypeMismatchError(node_type.kind, self.kind)
        return self._payload

    def assign(self, source: Any, *, move: bool = False) -> None:
        """Replace the payload with a copy of source (or source itself, moved)."""
        self._payload = _coerce(source, move)

    def take(self) -> "Value":
        """Move this Value out, leaving an Undefined behind."""
        payload = self._payload
        self._payload = Undefined()
        return Value._wrap(payload)

    def copy(self) -> "Value":
        """Deep copy of this Value, comments included."""
        return Value._wrap(self._payload.copy())

    def __copy__(self) -> "Value":
        return self.copy()

    def __deepcopy__(self, memo: Optional[dict[int, Any]]) -> "Value":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Value):
            return self.kind == other.kind and self._payload == other._payload
        if isinstance(other, Node):
            return self.kind == other.kind and self._payload == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self._payload.render()

    def __repr__(self) -> str:
        return f"Value({self._payload.render()})"


class _ConstantValue(Value):
    """Read-only Undefined Value shared across the process."""

    @property
    def comment(self) -> str:
        return ""

    @comment.setter
    def comment(self, text: str) -> None:
        raise TypeError("The UNDEFINED constant cannot be modified")

    def as_(self, node_type: type[NodeT]) -> NodeT:
        # hand out a copy so the shared payload stays untouched
        return super().as_(node_type).copy()  # type: ignore[return-value]

    def assign(self, source: Any, *, move: bool = False) -> None:
        raise TypeError("The UNDEFINED constant cannot be modified")

    def take(self) -> Value:
        raise TypeError("The UNDEFINED constant cannot be moved from")


UNDEFINED: Value = _ConstantValue()

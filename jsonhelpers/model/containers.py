"""
Array and Object nodes of the document model.

Both containers own their elements exclusively: everything added is copied in
(or moved in with ``move=True``), so no Value is ever shared between two
containers. Neither container is internally synchronized.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Union

from .scalars import Kind, Node, Undefined, render_string

if TYPE_CHECKING:
    from .value import Value


def _to_value(source: Any, move: bool) -> "Value":
    # value.py depends on this module
    from .value import Value  # pylint: disable=import-outside-toplevel

    return Value(source, move=move)


def _undefined_constant() -> "Value":
    from .value import UNDEFINED  # pylint: disable=import-outside-toplevel

    return UNDEFINED


class Array(Node):
    """Ordered sequence of owned Values.

    Grows only through add(). Index access is checked: anything outside
    ``0 <= index < len(array)`` raises IndexError.
    """

    kind: ClassVar[Kind] = Kind.ARRAY

    def __init__(self, elements: Iterable[Any] = (), comment: str = ""):
        self.comment = comment
        self._elements: list["Value"] = []
        for element in elements:
            self.add(element)

    def add(self, value: Any, *, move: bool = False) -> None:
        """Append a copy of value, or transfer it in when move is set."""
        self._elements.append(_to_value(value, move))

    def __getitem__(self, index: int) -> "Value":
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"Array indices must be integers, not {type(index).__name__}")
        if not 0 <= index < len(self._elements):
            raise IndexError(
                f"Array index {index} out of range for size {len(self._elements)}"
            )
        return self._elements[index]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Array({self.render()})"

    def render(self) -> str:
        return "[" + ", ".join(str(element) for element in self._elements) + "]"

    def copy(self) -> "Array":
        result = Array(comment=self.comment)
        result._elements = [element.copy() for element in self._elements]
        return result

    def release(self) -> "Array":
        """Move all elements and the comment into a new Array, emptying this one."""
        result = Array(comment=self.comment)
        result._elements = self._elements
        self._elements = []
        self.comment = ""
        return result


class Object(Node):
    """Ordered collection of uniquely named Values.

    Members iterate and render in the order their names were first set.
    ``obj[name]`` on a missing name inserts an Undefined member at the end and
    returns it; use get() for lookups that must not change the object.
    """

    kind: ClassVar[Kind] = Kind.OBJECT

    def __init__(
        self,
        members: Union[Mapping[str, Any], Iterable[tuple[str, Any]], None] = None,
        comment: str = "",
    ):
        self.comment = comment
        self._members: dict[str, "Value"] = {}
        if members is not None:
            pairs = (
                members.items() if isinstance(members, (Mapping, Object)) else members
            )
            for name, value in pairs:
                self.set(name, value)

    def set(self, name: str, value: Any, *, move: bool = False) -> None:
        """Replace the member called name in place, or append it."""
        if not isinstance(name, str):
            raise TypeError(f"Member names must be str, not {type(name).__name__}")
        self._members[name] = _to_value(value, move)

    def get(self, name: str) -> "Value":
        """Return the member called name, or the shared UNDEFINED constant."""
        member = self._members.get(name)
        if member is None:
            return _undefined_constant()
        return member

    def __getitem__(self, name: str) -> "Value":
        if name not in self._members:
            self.set(name, Undefined())
        return self._members[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def keys(self) -> Iterator[str]:
        """Member names in order."""
        return iter(self._members.keys())

    def values(self) -> Iterator["Value"]:
        """Member values in order."""
        return iter(self._members.values())

    def items(self) -> Iterator[tuple[str, "Value"]]:
        """(name, value) pairs in order."""
        return iter(self._members.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return self._members == other._members

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Object({self.render()})"

    def render(self) -> str:
        members = (
            f"{render_string(name)} : {value}" for name, value in self._members.items()
        )
        return "{" + ", ".join(members) + "}"

    def copy(self) -> "Object":
        result = Object(comment=self.comment)
        result._members = {name: value.copy() for name, value in self._members.items()}
        return result

    def release(self) -> "Object":
        """Move all members and the comment into a new Object, emptying this one."""
        result = Object(comment=self.comment)
        result._members = self._members
        self._members = {}
        self.comment = ""
        return result

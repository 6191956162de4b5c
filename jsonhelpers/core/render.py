"""
Rendering and conversion of Value trees.

The text form is canonical and not configurable. It is not strict JSON:
``undefined`` and ``Null`` have no JSON counterpart.
"""

from typing import Any, TextIO, Union

from ..model.containers import Array, Object
from ..model.scalars import Bool, Double, Int, Node, Null, String, Undefined
from ..model.value import Value


def dumps(value: Union[Value, Node]) -> str:
    """Render a Value or node to its canonical text."""
    if not isinstance(value, (Value, Node)):
        raise TypeError(f"Cannot render {type(value).__name__}; build a Value first")
    return str(value)


def dump(value: Union[Value, Node], fp: TextIO) -> None:
    """Write the canonical text of a Value or node to a text stream."""
    fp.write(dumps(value))


def to_python(value: Union[Value, Node]) -> Any:
    """
    Convert a Value tree into plain Python objects.

    Undefined and Null both become None, Array a list and Object a dict in
    member order. Comments are dropped.
    """
    node = value.as_(Node) if isinstance(value, Value) else value

    if isinstance(node, (Undefined, Null)):
        return None
    if isinstance(node, (Bool, Int, Double, String)):
        return node.value
    if isinstance(node, Array):
        return [to_python(element) for element in node]
    if isinstance(node, Object):
        return {name: to_python(member) for name, member in node.items()}
    raise TypeError(f"Cannot convert {type(value).__name__}")

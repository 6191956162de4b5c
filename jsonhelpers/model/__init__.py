"""
jsonhelpers document model.

This module provides the Value tagged union and the node types it can hold.
"""

from .containers import Array, Object
from .scalars import Bool, Double, Int, Kind, Node, Null, String, Undefined
from .value import UNDEFINED, Value

__all__ = [
    'Value', 'Kind', 'UNDEFINED', 'Node',
    'Undefined', 'Null', 'Bool', 'Int', 'Double', 'String',
    'Array', 'Object',
]

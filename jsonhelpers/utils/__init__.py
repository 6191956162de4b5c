"""
jsonhelpers configuration.
"""

from .config import (
    ErrorReporting,
    ParseConfig,
    ParseLimits,
    ParsingBehavior,
    SizeLimits,
    StructureLimits,
)

__all__ = [
    'ParseConfig', 'ParseLimits', 'SizeLimits', 'StructureLimits',
    'ParsingBehavior', 'ErrorReporting',
]

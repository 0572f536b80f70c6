"""
Serialization helpers for analysis results.

Converts result dataclasses into plain JSON-safe structures and formats
numbers the way they appear in analysis messages.
"""

import math
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any


def format_number(value: Any) -> str:
    """
    Format a number for display in a message.
    
    Integral floats drop their fractional part, so a 1.0px letter
    spacing reads "1px" and a 1.5px spacing reads "1.5px".
    
    Args:
        value: Number to format
        
    Returns:
        Display string
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def to_dict(obj: Any) -> Any:
    """
    Convert a result object into JSON-safe data.
    
    Enums become their values and non-finite floats become strings,
    since strict JSON has no representation for them.
    
    Args:
        obj: Dataclass instance, list, dict or scalar
        
    Returns:
        Plain data structure
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_dict(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {str(k): to_dict(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_dict(v) for v in obj]
    if isinstance(obj, float) and not math.isfinite(obj):
        return format_number(obj)
    return obj

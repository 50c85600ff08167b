from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..core.types import DailyRecord

AttrFunc = Callable[[DailyRecord], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc, *, replace: bool = False) -> None:
    """Make ``fn`` available as ``name`` in ``compute_daily_record(attributes=...)``."""
    if name in _REGISTRY and not replace:
        raise ValueError(f"Attribute '{name}' is already registered")
    _REGISTRY[name] = fn

def available_attributes() -> List[str]:
    return sorted(_REGISTRY)

def compute_attributes(record: DailyRecord, names: Sequence[str]) -> Dict[str, Any]:
    unknown = [n for n in names if n not in _REGISTRY]
    if unknown:
        raise KeyError(f"Unknown attribute(s) {unknown}. Available: {available_attributes()}")
    merged: Dict[str, Any] = {}
    for name in names:
        merged.update(_REGISTRY[name](record))
    return merged

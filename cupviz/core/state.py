from dataclasses import dataclass, field
from typing import Optional, Tuple

from cupviz.core.enums import CupSize

@dataclass(frozen=True)
class CustomizationState:
    """Beverage selections a single render works from"""
    base: str = 'brewed coffee'
    milk: str = 'no milk'
    syrup: str = 'no sweetener'
    toppings: Tuple[str, ...] = field(default_factory=tuple)
    ice: bool = False
    size: CupSize = CupSize.MEDIUM
    sugar_level: Optional[float] = 0

    def __post_init__(self):
        # Callers often hand over lists straight from the UI
        if not isinstance(self.toppings, tuple):
            object.__setattr__(self, 'toppings', tuple(self.toppings))
        if self.sugar_level is None:
            object.__setattr__(self, 'sugar_level', 0)

@dataclass(frozen=True)
class ToppingBuckets:
    """Toppings split by the layer they feed"""
    milk: Tuple[str, ...] = ()
    syrup: Tuple[str, ...] = ()
    powder: Tuple[str, ...] = ()
    other: Tuple[str, ...] = ()

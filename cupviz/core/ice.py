"""Seeded ice cube placement"""
import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from cupviz.core.config import (
    ICE_COUNTS,
    ICE_SEEDS,
    LCG_INCREMENT,
    LCG_MODULUS,
    LCG_MULTIPLIER,
)
from cupviz.core.enums import CupSize
from cupviz.core.geometry import Outline, compute_outline, cup_height, edge_x_left, edge_x_right, lerp

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class IceCube:
    x: float
    y: float
    side: float

@dataclass(frozen=True)
class IceParameters:
    count: int
    min_side: int
    max_side: int
    top_pad: float
    side_pad: float
    bottom_pad: float

    @classmethod
    def for_size(cls, size: CupSize) -> 'IceParameters':
        h = cup_height(size)
        min_side = max(10, math.floor(h * 0.022))
        return cls(
            count=ICE_COUNTS[size],
            min_side=min_side,
            max_side=max(min_side + 2, math.floor(h * 0.045)),
            top_pad=max(8, h * 0.04),
            side_pad=max(6, h * 0.035),
            bottom_pad=max(20, h * 0.08)
        )

class LinearCongruentialGenerator:
    """32-bit LCG, reproducible across platforms"""

    def __init__(self, seed: int):
        self.seed = seed % LCG_MODULUS

    def next_seed(self) -> int:
        self.seed = (self.seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.seed

    def draw(self) -> float:
        """Next value in [0, 1)"""
        return self.next_seed() / LCG_MODULUS

def scatter_ice(size: CupSize, outline: Outline) -> Tuple[IceCube, ...]:
    """Place the cubes for a size inside the given outline"""
    params = IceParameters.for_size(size)
    rng = LinearCongruentialGenerator(ICE_SEEDS[size])
    y_min = outline.inner_top_left.y + params.top_pad
    y_max = outline.inner_bottom_left.y - params.bottom_pad

    cubes = []
    for _ in range(params.count):
        y = lerp(y_min, y_max, rng.draw())
        left_x = edge_x_left(outline, y) + params.side_pad
        right_x = edge_x_right(outline, y) - params.side_pad
        side = lerp(params.min_side, params.max_side, rng.draw())
        max_x = max(left_x, right_x - side)
        x = lerp(left_x, max_x, rng.draw())
        cubes.append(IceCube(x=x, y=y, side=side))
    return tuple(cubes)

@lru_cache(maxsize=None)
def _cached_ice_cubes(size: CupSize, ice_enabled: bool) -> Tuple[IceCube, ...]:
    if not ice_enabled:
        return ()
    cubes = scatter_ice(size, compute_outline(size))
    logger.info(f"Generated {len(cubes)} ice cubes for {size.value} cup")
    return cubes

def generate_ice_cubes(size: CupSize, ice_enabled: bool, outline: Optional[Outline] = None) -> Tuple[IceCube, ...]:
    """Ice cubes for a cup, empty when the drink has no ice

    The result depends only on size and ice, so it is cached by that pair
    unless a custom outline is supplied.
    """
    if outline is None:
        return _cached_ice_cubes(size, ice_enabled)
    if not ice_enabled:
        return ()
    return scatter_ice(size, outline)

def clear_ice_cache():
    _cached_ice_cubes.cache_clear()

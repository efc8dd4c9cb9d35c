"""Vertical allocation of the liquid bands inside the cup

Bands stack top to bottom as syrup, milk, powder and the base drink. The
syrup band only gets height from the manual sugar level; milk and powder
split what is left evenly with the base, which always runs down to the
inner bottom of the cup.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from cupviz.core.config import (
    ADDITIONAL_MILK_COLOR,
    BASE_COLORS,
    DEFAULT_BASE_COLOR,
    DEFAULT_MILK_COLOR,
    MAX_SYRUP_SHARE,
    MILK_COLORS,
    NO_MILK_COLOR,
)
from cupviz.core.enums import LayerKind
from cupviz.core.geometry import Outline, Point, clamp, trapezoid_path
from cupviz.core.state import CustomizationState, ToppingBuckets

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class LayerBand:
    kind: LayerKind
    top_y: float
    bottom_y: float

    @property
    def height(self) -> float:
        # Negative when the optional bands overflow the cup
        return self.bottom_y - self.top_y

    def polygon(self, outline: Outline) -> List[Point]:
        return trapezoid_path(outline, self.top_y, self.bottom_y)

@dataclass(frozen=True)
class LayerPlan:
    bands: Tuple[LayerBand, ...]
    milk_color: str
    base_color: str
    has_milk: bool = False
    has_additional_milk: bool = False
    has_syrup: bool = False
    has_additional_syrup: bool = False
    has_powder: bool = False
    has_manual_sugar: bool = False

    def band(self, kind: LayerKind) -> Optional[LayerBand]:
        for band in self.bands:
            if band.kind is kind:
                return band
        return None

    @property
    def syrup_band(self) -> Optional[LayerBand]:
        return self.band(LayerKind.SYRUP)

    @property
    def milk_band(self) -> Optional[LayerBand]:
        return self.band(LayerKind.MILK)

    @property
    def powder_band(self) -> Optional[LayerBand]:
        return self.band(LayerKind.POWDER)

    @property
    def base_band(self) -> LayerBand:
        return self.bands[-1]

def resolve_milk_color(milk: Optional[str]) -> str:
    """Fill for the milk band; unknown names fall back on whether they mention milk"""
    key = (milk or 'no milk').lower()
    if key in MILK_COLORS:
        return MILK_COLORS[key]
    return DEFAULT_MILK_COLOR if 'milk' in key else NO_MILK_COLOR

def resolve_base_color(base: Optional[str]) -> str:
    return BASE_COLORS.get((base or '').lower(), DEFAULT_BASE_COLOR)

def has_syrup_selected(syrup: Optional[str]) -> bool:
    return bool(syrup) and syrup.lower() != 'no sweetener'

def allocate_layers(state: CustomizationState, buckets: ToppingBuckets, outline: Outline) -> LayerPlan:
    """Decide which bands exist and how much of the cup each one fills"""
    milk_key = (state.milk or 'no milk').lower()
    milk_color = resolve_milk_color(state.milk)
    has_milk = milk_key != 'no milk' and milk_color != NO_MILK_COLOR
    has_additional_milk = len(buckets.milk) > 0
    has_syrup = has_syrup_selected(state.syrup)
    has_additional_syrup = len(buckets.syrup) > 0
    has_powder = len(buckets.powder) > 0
    has_manual_sugar = state.sugar_level > 0

    total_height = outline.inner_height
    syrup_intensity = clamp(state.sugar_level / 100, 0, 1)
    max_syrup_height = MAX_SYRUP_SHARE * total_height
    syrup_height = max_syrup_height * syrup_intensity if has_manual_sugar else 0
    remaining_height = total_height - syrup_height

    # Milk and additional milk share one band but both count here
    other_layer_count = int(has_milk) + int(has_additional_milk) + int(has_powder)
    if other_layer_count > 0:
        other_layer_height = remaining_height / (other_layer_count + 1)
    else:
        other_layer_height = remaining_height

    bands = []
    current_y = outline.inner_top_left.y

    if has_syrup or has_additional_syrup or has_manual_sugar:
        bands.append(LayerBand(LayerKind.SYRUP, current_y, current_y + syrup_height))
        current_y += syrup_height

    if has_milk or has_additional_milk:
        bands.append(LayerBand(LayerKind.MILK, current_y, current_y + other_layer_height))
        current_y += other_layer_height

    if has_powder:
        bands.append(LayerBand(LayerKind.POWDER, current_y, current_y + other_layer_height))
        current_y += other_layer_height

    bands.append(LayerBand(LayerKind.BASE, current_y, outline.inner_bottom_left.y))

    if has_additional_milk:
        milk_color = ADDITIONAL_MILK_COLOR

    logger.debug(f"Allocated bands: {[(b.kind.value, round(b.height, 2)) for b in bands]}")
    return LayerPlan(
        bands=tuple(bands),
        milk_color=milk_color,
        base_color=resolve_base_color(state.base),
        has_milk=has_milk,
        has_additional_milk=has_additional_milk,
        has_syrup=has_syrup,
        has_additional_syrup=has_additional_syrup,
        has_powder=has_powder,
        has_manual_sugar=has_manual_sugar
    )

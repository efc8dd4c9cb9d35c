"""Assembles the cup drawing as an ordered list of primitives, back to front"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from cupviz.core.config import (
    BASELINE_WIDTH,
    ICE_CORNER_RADIUS,
    ICE_FILL,
    ICE_OPACITY,
    ICE_STROKE,
    LAYER_OPACITY,
    LID_COLOR,
    LID_HEIGHT_RATIO,
    LID_HIGHLIGHT_COLOR,
    LID_HIGHLIGHT_OPACITY,
    LID_OVERHANG_RATIO,
    LID_RIM_COLOR,
    LID_SHADOW_OPACITY,
    OUTLINE_STROKE,
    POWDER_COLOR,
    SYRUP_COLOR,
    TOPPING_DOT_FILL,
    TOPPING_DOT_LIMIT,
    TOPPING_DOT_RADIUS,
    TOPPING_DOT_STROKE,
)
from cupviz.core.enums import LayerKind, ShapeKind
from cupviz.core.geometry import Outline, Point, compute_outline
from cupviz.core.ice import IceCube, generate_ice_cubes
from cupviz.core.layers import LayerBand, LayerPlan, allocate_layers
from cupviz.core.state import CustomizationState
from cupviz.core.toppings import classify_toppings

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Stroke:
    color: str
    width: float = 1

@dataclass(frozen=True)
class Primitive:
    shape: ShapeKind
    geometry: Dict[str, Any]
    fill: Optional[str] = None
    opacity: float = 1.0
    stroke: Optional[Stroke] = None
    role: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'shape': self.shape.value,
            'role': self.role,
            'geometry': self.geometry,
            'fill': self.fill,
            'opacity': self.opacity,
            'stroke': {'color': self.stroke.color, 'width': self.stroke.width} if self.stroke else None
        }

def _points(points: List[Point]) -> List[List[float]]:
    return [[p.x, p.y] for p in points]

def _polygon(points: List[Point], role: str, **kwargs) -> Primitive:
    return Primitive(ShapeKind.POLYGON, {'points': _points(points)}, role=role, **kwargs)

def _rect(x, y, width, height, radius, role: str, **kwargs) -> Primitive:
    geometry = {'x': x, 'y': y, 'width': width, 'height': height, 'rx': radius, 'ry': radius}
    return Primitive(ShapeKind.RECT, geometry, role=role, **kwargs)

def band_primitive(band: LayerBand, plan: LayerPlan, outline: Outline) -> Primitive:
    fills = {
        LayerKind.BASE: (plan.base_color, 1.0),
        LayerKind.POWDER: (POWDER_COLOR, LAYER_OPACITY['powder']),
        LayerKind.MILK: (plan.milk_color, LAYER_OPACITY['milk']),
        LayerKind.SYRUP: (SYRUP_COLOR, LAYER_OPACITY['syrup'])
    }
    fill, opacity = fills[band.kind]
    return _polygon(band.polygon(outline), f'band:{band.kind.value}', fill=fill, opacity=opacity)

def ice_primitive(cube: IceCube) -> Primitive:
    return _rect(cube.x, cube.y, cube.side, cube.side, ICE_CORNER_RADIUS, 'ice',
                 fill=ICE_FILL, opacity=ICE_OPACITY, stroke=Stroke(ICE_STROKE))

def topping_dots(toppings, outline: Outline) -> List[Primitive]:
    """One dot per decorative topping along the rim, at most three"""
    top_left = outline.outer_top_left
    dots = []
    for idx, _ in enumerate(toppings[:TOPPING_DOT_LIMIT]):
        geometry = {
            'cx': top_left.x + 25 + idx * 22,
            'cy': top_left.y + 25 - (idx % 2) * 6,
            'r': TOPPING_DOT_RADIUS
        }
        dots.append(Primitive(ShapeKind.CIRCLE, geometry, fill=TOPPING_DOT_FILL,
                              stroke=Stroke(TOPPING_DOT_STROKE), role='topping'))
    return dots

def lid_primitives(outline: Outline) -> List[Primitive]:
    """Shadow, capsule, glossy highlight and rim of the lid"""
    cup_top_y = outline.outer_top_left.y
    cup_left_x = outline.outer_top_left.x
    cup_top_width = outline.top_width
    lid_height = outline.height * LID_HEIGHT_RATIO
    overhang = cup_top_width * LID_OVERHANG_RATIO
    lid_x = cup_left_x - overhang
    lid_y = cup_top_y - lid_height
    lid_width = cup_top_width + overhang * 2

    shadow = Primitive(
        ShapeKind.ELLIPSE,
        {'cx': cup_left_x + cup_top_width / 2, 'cy': cup_top_y + 2,
         'rx': (cup_top_width / 2) * 1.02, 'ry': 4},
        fill='#000', opacity=LID_SHADOW_OPACITY, role='lid:shadow'
    )
    capsule = _rect(lid_x, lid_y, lid_width, lid_height, lid_height / 2, 'lid', fill=LID_COLOR)
    highlight = _rect(lid_x + lid_width * 0.06, lid_y + lid_height * 0.08,
                      lid_width * 0.88, lid_height * 0.18, lid_height * 0.12,
                      'lid:highlight', fill=LID_HIGHLIGHT_COLOR, opacity=LID_HIGHLIGHT_OPACITY)
    rim = _rect(cup_left_x - overhang * 0.1, cup_top_y - 1,
                cup_top_width + overhang * 0.2, 3, 1.5, 'lid:rim', fill=LID_RIM_COLOR)
    return [shadow, capsule, highlight, rim]

def render_drink(state: CustomizationState) -> List[Primitive]:
    """Turn a customization into the primitives of the layered cup drawing"""
    outline = compute_outline(state.size)
    buckets = classify_toppings(state.toppings)
    plan = allocate_layers(state, buckets, outline)

    primitives = [
        _polygon(outline.outer_points(), 'outline', fill=None,
                 stroke=Stroke(OUTLINE_STROKE, outline.wall))
    ]

    # Lower bands first so the upper ones sit on top
    for band in reversed(plan.bands):
        primitives.append(band_primitive(band, plan, outline))

    primitives.extend(ice_primitive(cube) for cube in generate_ice_cubes(state.size, state.ice))
    primitives.extend(topping_dots(buckets.other, outline))

    bottom_left, bottom_right = outline.outer_bottom_left, outline.outer_bottom_right
    primitives.append(Primitive(
        ShapeKind.LINE,
        {'x1': bottom_left.x, 'y1': bottom_left.y, 'x2': bottom_right.x, 'y2': bottom_right.y},
        stroke=Stroke(OUTLINE_STROKE, BASELINE_WIDTH),
        role='baseline'
    ))
    primitives.extend(lid_primitives(outline))

    logger.debug(f"Rendered {len(primitives)} primitives for {state.size.value} cup")
    return primitives

"""Cup outline and the wall interpolation every layer is cut against"""
import logging
from dataclasses import dataclass
from typing import List, Tuple

from cupviz.core.config import CUP_HEIGHTS, CUP_WIDTH_RATIO, VIEWPORT_PADDING, WALL_WIDTH
from cupviz.core.enums import CupSize

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> 'Point':
        return Point(self.x + dx, self.y + dy)

@dataclass(frozen=True)
class Outline:
    outer_top_left: Point
    outer_top_right: Point
    outer_bottom_right: Point
    outer_bottom_left: Point
    inner_top_left: Point
    inner_top_right: Point
    inner_bottom_right: Point
    inner_bottom_left: Point
    width: float
    height: float
    wall: float

    @property
    def inner_height(self) -> float:
        return self.inner_bottom_left.y - self.inner_top_left.y

    @property
    def top_width(self) -> float:
        return self.outer_top_right.x - self.outer_top_left.x

    def outer_points(self) -> List[Point]:
        return [self.outer_top_left, self.outer_top_right,
                self.outer_bottom_right, self.outer_bottom_left]

def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t

def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)

def cup_height(size: CupSize) -> int:
    return CUP_HEIGHTS[size]

def compute_outline(size: CupSize) -> Outline:
    """Build the outer and inner cup corners for a size"""
    h = cup_height(size)
    w = h * CUP_WIDTH_RATIO
    wall = WALL_WIDTH

    outer_top_left = Point(w * 0.15, h * 0.15)
    outer_top_right = Point(w * 0.85, h * 0.15)
    outer_bottom_right = Point(w * 0.75, h)
    outer_bottom_left = Point(w * 0.25, h)

    outline = Outline(
        outer_top_left=outer_top_left,
        outer_top_right=outer_top_right,
        outer_bottom_right=outer_bottom_right,
        outer_bottom_left=outer_bottom_left,
        inner_top_left=outer_top_left.offset(wall, wall),
        inner_top_right=outer_top_right.offset(-wall, wall),
        inner_bottom_right=outer_bottom_right.offset(-wall, -wall),
        inner_bottom_left=outer_bottom_left.offset(wall, -wall),
        width=w,
        height=h,
        wall=wall
    )
    logger.debug(f"Computed {size.value} outline: {w:.1f}x{h}")
    return outline

def viewport(outline: Outline) -> Tuple[float, float]:
    """Size of the drawing area a renderer should map the design units to"""
    return outline.width, outline.height + VIEWPORT_PADDING

def edge_x_left(outline: Outline, y: float) -> float:
    """X of the inner left wall at height y"""
    top, bottom = outline.inner_top_left, outline.inner_bottom_left
    t = clamp((y - top.y) / (bottom.y - top.y), 0, 1)
    return lerp(top.x, bottom.x, t)

def edge_x_right(outline: Outline, y: float) -> float:
    """X of the inner right wall at height y"""
    top, bottom = outline.inner_top_right, outline.inner_bottom_right
    t = clamp((y - top.y) / (bottom.y - top.y), 0, 1)
    return lerp(top.x, bottom.x, t)

def trapezoid_path(outline: Outline, y_top: float, y_bottom: float) -> List[Point]:
    """Slice of the cup interior between two heights, clockwise from top left"""
    return [
        Point(edge_x_left(outline, y_top), y_top),
        Point(edge_x_right(outline, y_top), y_top),
        Point(edge_x_right(outline, y_bottom), y_bottom),
        Point(edge_x_left(outline, y_bottom), y_bottom)
    ]

"""SVG output for rendered primitives"""
from typing import Iterable, Tuple

import svgwrite

from cupviz.core.enums import ShapeKind
from cupviz.core.renderer import Primitive

def _num(value: float) -> float:
    return round(value, 2)

def _paint(primitive: Primitive) -> dict:
    attrs = {'fill': primitive.fill or 'none'}
    if primitive.stroke:
        attrs['stroke'] = primitive.stroke.color
        attrs['stroke_width'] = _num(primitive.stroke.width)
    if primitive.opacity < 1:
        attrs['opacity'] = _num(primitive.opacity)
    return attrs

def element(dwg: svgwrite.Drawing, primitive: Primitive):
    """svgwrite element for a single primitive"""
    g = primitive.geometry
    paint = _paint(primitive)

    if primitive.shape == ShapeKind.POLYGON:
        # Degenerate bands (top below bottom) still make a valid, invisible shape
        return dwg.polygon(points=[(_num(x), _num(y)) for x, y in g['points']], **paint)
    if primitive.shape == ShapeKind.RECT:
        return dwg.rect(insert=(_num(g['x']), _num(g['y'])), size=(_num(g['width']), _num(g['height'])),
                        rx=_num(g['rx']), ry=_num(g['ry']), **paint)
    if primitive.shape == ShapeKind.CIRCLE:
        return dwg.circle(center=(_num(g['cx']), _num(g['cy'])), r=_num(g['r']), **paint)
    if primitive.shape == ShapeKind.ELLIPSE:
        return dwg.ellipse(center=(_num(g['cx']), _num(g['cy'])), r=(_num(g['rx']), _num(g['ry'])), **paint)
    if primitive.shape == ShapeKind.LINE:
        return dwg.line(start=(_num(g['x1']), _num(g['y1'])), end=(_num(g['x2']), _num(g['y2'])), **paint)
    raise ValueError(f"Unsupported shape: {primitive.shape}")

def new_drawing(viewport: Tuple[float, float]) -> svgwrite.Drawing:
    width, height = viewport
    # Colours such as 'transparent' are outside the validator's palette
    return svgwrite.Drawing(viewBox=f"0 0 {width:g} {height:g}",
                            preserveAspectRatio='xMidYMid meet', debug=False)

def to_svg(primitives: Iterable[Primitive], viewport: Tuple[float, float]) -> str:
    """Serialize primitives into a standalone SVG document"""
    dwg = new_drawing(viewport)
    for primitive in primitives:
        dwg.add(element(dwg, primitive))
    return dwg.tostring()

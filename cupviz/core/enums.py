from enum import Enum

class CupSize(Enum):
    MEDIUM = "medium"
    LARGE = "large"

class LayerKind(Enum):
    SYRUP = "syrup"
    MILK = "milk"
    POWDER = "powder"
    BASE = "base"

class ShapeKind(Enum):
    POLYGON = "polygon"
    RECT = "rect"
    CIRCLE = "circle"
    LINE = "line"
    ELLIPSE = "ellipse"

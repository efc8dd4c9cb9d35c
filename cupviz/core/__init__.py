from .enums import CupSize, LayerKind, ShapeKind
from .state import CustomizationState, ToppingBuckets
from .geometry import compute_outline, edge_x_left, edge_x_right, trapezoid_path, viewport
from .toppings import classify_toppings
from .layers import LayerBand, LayerPlan, allocate_layers
from .ice import IceCube, generate_ice_cubes
from .renderer import Primitive, render_drink

__all__ = [
    'CupSize', 'LayerKind', 'ShapeKind', 'CustomizationState', 'ToppingBuckets',
    'compute_outline', 'edge_x_left', 'edge_x_right', 'trapezoid_path', 'viewport',
    'classify_toppings', 'LayerBand', 'LayerPlan', 'allocate_layers',
    'IceCube', 'generate_ice_cubes', 'Primitive', 'render_drink'
]

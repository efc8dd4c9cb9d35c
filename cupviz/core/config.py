from decouple import config
from dotenv import load_dotenv

from cupviz.core.enums import CupSize

load_dotenv()

# Runtime settings for the preview service
PORT = config('PORT', default=10000, cast=int)
HOST = config('HOST', default='0.0.0.0')
LOG_LEVEL = config('LOG_LEVEL', default='INFO')
LOG_DIR = config('LOG_DIR', default='logs')

# Cup geometry, in design units
CUP_HEIGHTS = {
    CupSize.MEDIUM: 300,
    CupSize.LARGE: 500
}
CUP_WIDTH_RATIO = 1.1
WALL_WIDTH = 8
VIEWPORT_PADDING = 20

# Share of the inner height a full sugar level may take
MAX_SYRUP_SHARE = 0.4

MILK_COLORS = {
    'no milk': 'transparent',
    'whole milk': '#F5F5DC',
    'fresh milk': '#F5F5DC',
    'oat milk': '#F2E7C9',
    'almond milk': '#EFE6D6',
    'soy milk': '#F3EED9',
    'cream': '#FFF3D6'
}
DEFAULT_MILK_COLOR = '#F5F5DC'
NO_MILK_COLOR = 'transparent'
ADDITIONAL_MILK_COLOR = '#FFFDF5'

BASE_COLORS = {
    'espresso': '#3B2220',
    'americano': '#4A2C2A',
    'brewed coffee': '#4A2C2A',
    'matcha': '#7BA05B'
}
DEFAULT_BASE_COLOR = '#4A2C2A'

SYRUP_COLOR = '#C07A3A'
POWDER_COLOR = '#8B5A2B'

LAYER_OPACITY = {
    'powder': 0.8,
    'milk': 1.0,
    'syrup': 0.9
}

ICE_FILL = '#FFFFFF'
ICE_STROKE = '#BBD7FF'
ICE_OPACITY = 0.35
ICE_CORNER_RADIUS = 3
ICE_COUNTS = {
    CupSize.MEDIUM: 11,
    CupSize.LARGE: 16
}
ICE_SEEDS = {
    CupSize.MEDIUM: 6789,
    CupSize.LARGE: 12345
}

# 32-bit linear congruential generator (Numerical Recipes constants)
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32

TOPPING_DOT_LIMIT = 3
TOPPING_DOT_FILL = '#F1C27D'
TOPPING_DOT_STROKE = '#AA7A39'
TOPPING_DOT_RADIUS = 4

OUTLINE_STROKE = '#000'
BASELINE_WIDTH = 2

LID_COLOR = '#2D1B1A'
LID_RIM_COLOR = '#1f1211'
LID_HIGHLIGHT_COLOR = '#FFFFFF'
LID_HIGHLIGHT_OPACITY = 0.08
LID_SHADOW_OPACITY = 0.15
LID_HEIGHT_RATIO = 0.12
LID_OVERHANG_RATIO = 0.08

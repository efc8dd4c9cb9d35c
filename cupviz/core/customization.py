"""Turns customize-drink screen selections into a CustomizationState

This is the boundary where UI input gets validated; the engine itself
trusts whatever state it is handed.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from cupviz.core.enums import CupSize
from cupviz.core.state import CustomizationState

logger = logging.getLogger(__name__)

SIZE_LABELS = {
    'regular': CupSize.MEDIUM,
    'medium': CupSize.MEDIUM,
    'large': CupSize.LARGE
}

TRUTHY = {'1', 'true', 'yes', 'on', 'iced'}

def parse_size(label) -> CupSize:
    """Map a size label from the UI to a cup size"""
    if isinstance(label, CupSize):
        return label
    size = SIZE_LABELS.get(str(label or '').strip().lower())
    if size is None:
        raise ValueError(f"Invalid size: {label}")
    return size

def parse_sugar_level(value) -> float:
    """Sugar level as a number in [0, 100]"""
    if value is None or value == '':
        return 0
    try:
        level = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid sugar level: {value}")
    if not 0 <= level <= 100:
        raise ValueError(f"Sugar level must be between 0 and 100, got {level}")
    return level

def parse_flag(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or '').strip().lower() in TRUTHY

def base_type_for(item_name: str) -> str:
    """Base drink shown in the cup for a menu item"""
    name = (item_name or '').lower()
    if any(word in name for word in ['espresso', 'latte', 'mocha', 'macchiato']):
        return 'espresso'
    if 'americano' in name:
        return 'americano'
    if 'matcha' in name:
        return 'matcha'
    return 'brewed coffee'

def syrup_from_addons(addons: Mapping[str, Any]) -> str:
    """First selected syrup add-on, e.g. 'caramel_syrup' -> 'caramel'"""
    for addon_id in addons:
        if addon_id.endswith('_syrup'):
            return addon_id[:-len('_syrup')]
    return 'No Sweetener'

def toppings_from_addons(addons: Mapping[str, Any]) -> List[str]:
    """Lower-cased labels of the non-syrup add-ons"""
    toppings = []
    for addon_id, addon in addons.items():
        if addon_id.endswith('_syrup') or addon_id == 'extra_shot':
            continue
        label = addon.get('label', addon_id) if isinstance(addon, Mapping) else addon_id
        toppings.append(str(label).lower())
    return toppings

def parse_quantity(value) -> float:
    """Add-on quantity as a number; missing means one serving"""
    if value is None:
        return 1
    if isinstance(value, bool):
        raise ValueError(f"Invalid quantity: {value}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid quantity: {value}")

def text_field(item: Mapping[str, Any], key: str, default: str = '') -> str:
    """String field of the item, rejecting other JSON types"""
    value = item.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string")
    return value

def _selected_addons(customizations) -> Dict[str, Any]:
    if customizations is None:
        return {}
    if not isinstance(customizations, Mapping):
        raise ValueError("Customizations must be an object of add-on id to details")

    selected = {}
    for addon_id, addon in customizations.items():
        if isinstance(addon, Mapping):
            if addon.get('selected', True) is False or parse_quantity(addon.get('quantity')) <= 0:
                continue
        selected[addon_id] = addon
    return selected

def state_from_item(item: Mapping[str, Any]) -> CustomizationState:
    """Build the state from a customized cart item

    Expects the shape the customize screen adds to the cart: name, size
    ('Regular' or 'Large'), temperature, milk, sweetener, sugarLevel and a
    customizations mapping of add-on id to its details.
    """
    if not isinstance(item, Mapping):
        raise ValueError("Customized item must be an object")

    name = text_field(item, 'name')
    addons = _selected_addons(item.get('customizations'))
    sweetener = text_field(item, 'sweetener')
    sugar_level = parse_sugar_level(item.get('sugarLevel')) if sweetener.lower() == 'sugar' else 0

    state = CustomizationState(
        base=base_type_for(name),
        milk=text_field(item, 'milk') or 'No Milk',
        syrup=syrup_from_addons(addons),
        toppings=tuple(toppings_from_addons(addons)),
        ice=text_field(item, 'temperature', 'Hot').lower() == 'iced',
        size=parse_size(item.get('size', 'Regular')),
        sugar_level=sugar_level
    )
    logger.info(f"Built customization state for {name}: {state}")
    return state

def state_from_query(args: Mapping[str, Any], toppings: Optional[Iterable[str]] = None) -> CustomizationState:
    """Build the state from flat query parameters"""
    return CustomizationState(
        base=args.get('base') or 'brewed coffee',
        milk=args.get('milk') or 'no milk',
        syrup=args.get('syrup') or 'no sweetener',
        toppings=tuple(t for t in (toppings or []) if t),
        ice=parse_flag(args.get('ice')),
        size=parse_size(args.get('size', 'medium')),
        sugar_level=parse_sugar_level(args.get('sugar'))
    )

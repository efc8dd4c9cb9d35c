import pytest
from cupviz.core.customization import (
    base_type_for, parse_flag, parse_quantity, parse_size, parse_sugar_level, state_from_item, state_from_query
)
from cupviz.core.enums import CupSize

def test_parse_size_labels():
    assert parse_size('Regular') == CupSize.MEDIUM
    assert parse_size('medium') == CupSize.MEDIUM
    assert parse_size(' LARGE ') == CupSize.LARGE
    assert parse_size(CupSize.LARGE) == CupSize.LARGE

def test_parse_size_rejects_unknown():
    with pytest.raises(ValueError):
        parse_size('venti')

def test_parse_sugar_level():
    assert parse_sugar_level(None) == 0
    assert parse_sugar_level('75') == 75
    with pytest.raises(ValueError):
        parse_sugar_level('lots')
    with pytest.raises(ValueError):
        parse_sugar_level(120)

def test_parse_flag():
    assert parse_flag('1')
    assert parse_flag('Iced')
    assert parse_flag(True)
    assert not parse_flag(None)
    assert not parse_flag('hot')

@pytest.mark.parametrize("name, base", [
    ('Caramel Macchiato', 'espresso'),
    ('Iced Latte', 'espresso'),
    ('Americano', 'americano'),
    ('Matcha Frappe', 'matcha'),
    ('Iced Coffee', 'brewed coffee'),
    ('House Blend', 'brewed coffee'),
])
def test_base_type_for(name, base):
    assert base_type_for(name) == base

def test_state_from_customized_item():
    item = {
        'name': 'Spanish Latte',
        'size': 'Large',
        'temperature': 'Iced',
        'milk': 'Oat Milk',
        'sweetener': 'Sugar',
        'sugarLevel': 60,
        'customizations': {
            'extra_shot': {'label': 'Extra Espresso Shot', 'quantity': 1},
            'caramel_syrup': {'label': 'Caramel', 'quantity': 2},
            'whipped_cream': {'label': 'Whipped Cream', 'quantity': 1},
            'cinnamon': {'label': 'Cinnamon', 'quantity': 0}
        }
    }
    state = state_from_item(item)

    assert state.base == 'espresso'
    assert state.size == CupSize.LARGE
    assert state.ice is True
    assert state.milk == 'Oat Milk'
    assert state.syrup == 'caramel'
    assert state.toppings == ('whipped cream',)
    assert state.sugar_level == 60

def test_sugar_level_ignored_without_sugar_sweetener():
    state = state_from_item({'name': 'Latte', 'sweetener': 'Honey', 'sugarLevel': 80})

    assert state.sugar_level == 0
    assert state.syrup == 'No Sweetener'
    assert state.size == CupSize.MEDIUM
    assert state.ice is False
    assert state.milk == 'No Milk'

def test_state_from_item_rejects_bad_input():
    with pytest.raises(ValueError):
        state_from_item(['not', 'an', 'item'])
    with pytest.raises(ValueError):
        state_from_item({'name': 'Latte', 'size': 'Huge'})

@pytest.mark.parametrize('item', [
    {'name': 'Latte', 'milk': 5},
    {'name': 7},
    {'name': 'Latte', 'sweetener': ['Sugar']},
    {'name': 'Latte', 'temperature': True},
    {'name': 'Latte', 'customizations': ['whipped_cream']},
    {'name': 'Latte', 'customizations': {'whipped_cream': {'quantity': 'two'}}},
    {'name': 'Latte', 'customizations': {'whipped_cream': {'quantity': [1]}}},
])
def test_state_from_item_rejects_wrongly_typed_fields(item):
    with pytest.raises(ValueError):
        state_from_item(item)

def test_parse_quantity():
    assert parse_quantity(None) == 1
    assert parse_quantity('2') == 2
    assert parse_quantity(0) == 0
    with pytest.raises(ValueError):
        parse_quantity('lots')
    with pytest.raises(ValueError):
        parse_quantity(True)

def test_numeric_string_quantity_selects_addon():
    state = state_from_item({'name': 'Latte', 'customizations': {
        'whipped_cream': {'label': 'Whipped Cream', 'quantity': '2'},
        'cinnamon': {'label': 'Cinnamon', 'quantity': '0'}
    }})
    assert state.toppings == ('whipped cream',)

def test_state_from_query():
    args = {'size': 'large', 'milk': 'Almond Milk', 'ice': 'true', 'sugar': '25'}
    state = state_from_query(args, ['Cocoa', ''])

    assert state.size == CupSize.LARGE
    assert state.milk == 'Almond Milk'
    assert state.syrup == 'no sweetener'
    assert state.ice is True
    assert state.sugar_level == 25
    assert state.toppings == ('Cocoa',)

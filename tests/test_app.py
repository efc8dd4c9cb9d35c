import pytest
from app import app

@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client

def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.data == b'OK'

def test_cup_json_from_query(client):
    response = client.get('/cup?size=large&ice=1&milk=Oat%20Milk&topping=boba&topping=Cinnamon')
    data = response.get_json()

    assert response.status_code == 200
    assert data['size'] == 'large'
    assert data['viewport']['height'] == 520
    roles = [p['role'] for p in data['primitives']]
    assert roles.count('ice') == 16
    assert 'band:powder' in roles
    assert roles.count('topping') == 1

def test_cup_rejects_invalid_size(client):
    response = client.get('/cup?size=venti')
    assert response.status_code == 400
    assert 'Invalid size' in response.get_json()['error']

def test_cup_rejects_invalid_sugar(client):
    response = client.get('/cup.svg?sugar=150')
    assert response.status_code == 400

def test_cup_svg(client):
    response = client.get('/cup.svg?size=medium&sugar=100')
    assert response.status_code == 200
    assert response.mimetype == 'image/svg+xml'
    assert b'<svg' in response.data

def test_cup_from_customized_item(client):
    item = {
        'name': 'Matcha Latte',
        'size': 'Regular',
        'temperature': 'Hot',
        'milk': 'Whole Milk',
        'customizations': {'whipped_cream': {'label': 'Whipped Cream', 'quantity': 1}}
    }
    response = client.post('/cup', json=item)
    data = response.get_json()

    assert response.status_code == 200
    assert data['size'] == 'medium'
    roles = [p['role'] for p in data['primitives']]
    assert 'band:milk' in roles
    assert 'ice' not in roles

def test_cup_post_requires_json(client):
    response = client.post('/cup', data='nope', content_type='text/plain')
    assert response.status_code == 400

def test_unknown_route_is_404(client):
    assert client.get('/missing').status_code == 404

@pytest.mark.parametrize('item', [
    {'name': 'Latte', 'milk': 5},
    {'name': 7},
    {'name': 'Latte', 'customizations': ['whipped_cream']},
    {'name': 'Latte', 'customizations': {'whipped_cream': {'quantity': 'two'}}},
])
def test_cup_post_rejects_wrongly_typed_fields(client, item):
    response = client.post('/cup', json=item)
    assert response.status_code == 400
    assert 'error' in response.get_json()

import pytest

from promathx.memory import Memory
from promathx.server import create_app


@pytest.fixture
def memory():
    return Memory()

@pytest.fixture
def app(memory):
    return create_app(memory)

@pytest.fixture
def client(app):
    return app.test_client()


@pytest.mark.parametrize('test,res', [
    ('2+3*4', {'result': 14.0, 'scientific': '1.400000e1'}),
    ('(2+3)*4', {'result': 20.0, 'scientific': '2.000000e1'}),
    ('sin(0)', {'result': 0.0, 'scientific': '0'}),
    (' 1 / 8 ', {'result': 0.125, 'scientific': '1.250000e-1'})
])
def test_calculate(client, test, res):
    response = client.post('/calculate', json={'expression': test})
    assert response.status_code == 200
    res['status'] = 'success'
    assert response.get_json() == res


def test_calculate_form(client):
    response = client.post('/calculate', data={'expression': '1+1'})
    assert response.status_code == 200
    assert response.get_json()['result'] == 2.0


@pytest.mark.parametrize('test,message', [
    ({'expression': '10/0'}, 'Division by zero'),
    ({'expression': '(1+2'}, 'Mismatched parentheses'),
    ({'expression': 'cot(1)'}, 'Unknown function: cot'),
    ({'expression': '2+y'}, "Invalid character in expression: 'y'"),
    ({'expression': '1+'}, 'Invalid expression: unexpected end'),
    ({'expression': 'ln(-1)'}, 'Invalid input for natural logarithm'),
    ({'expression': 'sin(1e400)'}, 'Invalid input for sin'),
    ({'expression': '\u017fin(0)'},
     "Invalid character in expression: '\u017f'"),
    ({'expression': ''}, 'Expression is required'),
    ({'expression': None}, 'Expression is required'),
    ({}, 'Expression is required'),
    ({'expression': 5}, 'Expression must be a string'),
    ({'expression': ['1+1']}, 'Expression must be a string')
])
def test_calculate_error(client, test, message):
    response = client.post('/calculate', json=test)
    assert response.status_code == 400
    assert response.get_json() == {'status': 'error', 'message': message}


def test_calculate_no_body(client):
    response = client.post('/calculate')
    assert response.status_code == 400
    assert response.get_json()['message'] == 'Expression is required'


def test_memory(client, memory):
    response = client.get('/memory')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'success', 'value': None}

    response = client.post('/memory', json={'value': 42})
    assert response.status_code == 200
    assert response.get_json() == {
        'status': 'success',
        'message': 'Value stored in memory'
    }
    assert memory.recall() == 42.0
    assert client.get('/memory').get_json()['value'] == 42.0

    response = client.delete('/memory')
    assert response.status_code == 200
    assert response.get_json() == {
        'status': 'success',
        'message': 'Memory cleared'
    }
    assert memory.recall() is None
    assert client.get('/memory').get_json()['value'] is None


@pytest.mark.parametrize('test,res', [
    (0, 0.0),
    (-1.5, -1.5),
    ('3.5', 3.5),
    (' 7 ', 7.0),
    ('1e3', 1000.0)
])
def test_memory_store(client, test, res):
    assert client.post('/memory', json={'value': test}).status_code == 200
    assert client.get('/memory').get_json()['value'] == res


def test_memory_store_form(client, memory):
    assert client.post('/memory', data={'value': '12'}).status_code == 200
    assert memory.recall() == 12.0


@pytest.mark.parametrize('test,message', [
    ({}, 'Value is required'),
    ({'value': None}, 'Value is required'),
    ({'value': 'abc'}, 'Invalid numeric value'),
    ({'value': ''}, 'Invalid numeric value'),
    ({'value': True}, 'Invalid numeric value'),
    ({'value': [1]}, 'Invalid numeric value'),
    ({'value': {'x': 1}}, 'Invalid numeric value'),
    ({'value': 'nan'}, 'Invalid numeric value'),
    ({'value': 'inf'}, 'Invalid numeric value')
])
def test_memory_store_error(client, memory, test, message):
    memory.store(1)
    response = client.post('/memory', json=test)
    assert response.status_code == 400
    assert response.get_json() == {'status': 'error', 'message': message}
    assert memory.recall() == 1.0


def test_memory_clear_empty(client):
    assert client.delete('/memory').status_code == 200
    assert client.delete('/memory').status_code == 200


def test_create_app_memory():
    x = create_app().test_client()
    y = create_app().test_client()
    x.post('/memory', json={'value': 1})
    assert y.get('/memory').get_json()['value'] is None


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json() == {
        'status': 'OK',
        'message': 'ProMathX Calculator API is running'
    }


@pytest.mark.parametrize('method,url,code,message', [
    ('get', '/', 404, 'Not Found'),
    ('get', '/calculate', 405, 'Method Not Allowed'),
    ('put', '/memory', 405, 'Method Not Allowed')
])
def test_http_error(client, method, url, code, message):
    response = getattr(client, method)(url)
    assert response.status_code == code
    assert response.get_json() == {'status': 'error', 'message': message}


@pytest.mark.parametrize('debug', [False, True])
def test_internal_error(mocker, debug):
    mocker.patch('promathx.server.evaluate', side_effect=RuntimeError('boom'))
    client = create_app(debug=debug).test_client()
    response = client.post('/calculate', json={'expression': '1+1'})
    assert response.status_code == 500
    res = {'status': 'error', 'message': 'Something went wrong!'}
    if debug:
        res['error'] = 'boom'
    assert response.get_json() == res


ORIGIN = 'http://localhost:8080'


@pytest.mark.parametrize('test', [
    {'expression': '1+1'},
    {'expression': '1/0'}
])
def test_cors(client, test):
    response = client.post(
        '/calculate', json=test, headers={'Origin': ORIGIN}
    )
    assert response.headers['Access-Control-Allow-Origin'] == '*'


@pytest.mark.parametrize('url,method', [
    ('/calculate', 'POST'),
    ('/memory', 'DELETE')
])
def test_cors_preflight(client, url, method):
    response = client.options(url, headers={
        'Origin': ORIGIN,
        'Access-Control-Request-Method': method,
        'Access-Control-Request-Headers': 'Content-Type'
    })
    assert response.status_code == 200
    assert response.headers['Access-Control-Allow-Origin'] == '*'
    assert method in response.headers['Access-Control-Allow-Methods']

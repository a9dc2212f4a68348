import os
import pytest


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_roles(client):
    res = client.get('/api/roles')
    assert res.status_code == 200
    assert res.get_json() == {'roles': ['A', 'B', 'C']}


def test_session_snapshot_tracks_sockets(client, sio_factory):
    state = client.get('/api/session').get_json()
    assert state == {'roles': ['A', 'B', 'C'], 'players': [], 'ready': [], 'connections': 0}

    alice = sio_factory()
    sio_factory()
    alice.emit('selectRole', {'role': 'B'})
    alice.emit('playerReady', {'role': 'B'})

    state = client.get('/api/session').get_json()
    assert state['players'] == [{'role': 'B'}]
    assert state['connections'] == 2
    # A lone ready player rolls immediately, which clears the ready set
    assert state['ready'] == []


def test_cors_header(client):
    res = client.get('/api/roles', headers={'Origin': 'http://example.com'})
    assert res.headers.get('Access-Control-Allow-Origin') in ('*', 'http://example.com')


@pytest.mark.skipif('ROLES' in os.environ, reason='ROLES overridden in environment')
def test_default_roles_from_config():
    from config import Config
    from dice_table import create_app

    application = create_app(Config)
    with application.test_client() as c:
        roles = c.get('/api/roles').get_json()['roles']
    assert roles == ['建广', '建国', '李川', '凯宁', '鸿晓']


@pytest.mark.skipif('SECRET_KEY' in os.environ, reason='SECRET_KEY set in environment')
def test_dev_secret_key_fallback():
    from config import Config

    assert Config.SECRET_KEY == 'dice-table-dev-secret'

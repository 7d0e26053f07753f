import pytest

from gameofthree import create_app
import conftest


def test_index_serves_client(client):
    res = client.get('/')
    assert res.status_code == 200
    assert b'Game of Three' in res.data


def test_health(client):
    res = client.get('/health')
    assert res.status_code == 200
    assert res.get_json() == {'status': 'ok'}


def test_session_state_empty(client):
    res = client.get('/api/session')
    assert res.status_code == 200
    data = res.get_json()
    assert data == {'status': 'empty', 'game': None, 'seats': [False, False]}


def test_session_state_reflects_seats(client, manager):
    manager.connect('sid-a')
    manager.connect('sid-b')
    manager.session.player_two.numbers = [10]
    manager.submit_move('sid-b', 2)

    data = client.get('/api/session').get_json()
    assert data['status'] == 'active'
    assert data['seats'] == [True, True]
    assert data['game']['operations'] == [2]
    assert data['game']['playerOne']['numbers'] == [4]


def test_empty_seed_range_fails_at_startup():
    class BadConfig(conftest.TestConfig):
        SEED_MIN = 60
        SEED_MAX = 2

    with pytest.raises(ValueError):
        create_app(BadConfig)


def test_cors_headers(client):
    res = client.get('/health', headers={'Origin': 'http://example.com'})
    assert res.headers.get('Access-Control-Allow-Origin') in ('*', 'http://example.com')


def test_simulate_game_command(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['simulate-game', '--seed', '10', '--moves', '2,-1'])
    assert result.exit_code == 0, result.output
    assert 'Player 2 starts from 10' in result.output
    assert 'Player 2 plays 2 --> 4' in result.output
    assert 'Player 1 is the winner' in result.output


def test_simulate_game_command_rejects_bad_operator(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['simulate-game', '--seed', '10', '--moves', 'x'])
    assert result.exit_code != 0
    assert 'whole number' in result.output

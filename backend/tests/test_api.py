def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_rooms_starts_empty(client):
    res = client.get('/rooms')
    assert res.status_code == 200
    assert res.get_json() == {'tictactoe': [], 'drawguess': []}


def test_rooms_reflects_socket_joins(client, connect):
    players = [connect() for _ in range(3)]
    for p in players:
        p.emit('joinDrawGuess', 'sketch')
    players[0].emit('joinTicTacToe', 'grid')

    data = client.get('/rooms').get_json()
    assert data['tictactoe'] == [{'roomId': 'grid', 'players': 1, 'status': 'waiting'}]
    assert data['drawguess'] == [{'roomId': 'sketch', 'players': 3, 'status': 'playing'}]
    assert 'word' not in str(data)


def test_cors_allows_configured_origin(client):
    res = client.get('/', headers={'Origin': 'http://localhost:3000'})
    assert res.headers.get('Access-Control-Allow-Origin') == 'http://localhost:3000'

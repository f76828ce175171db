def _events(test_client, name):
    return [pkt['args'] for pkt in test_client.get_received() if pkt['name'] == name]


def _received(test_client):
    return [(pkt['name'], pkt['args']) for pkt in test_client.get_received()]


def _start_game(host, guest, room_id='ABC', host_number='1234', guest_number='5678'):
    host.emit('createRoom', room_id)
    guest.emit('joinRoom', room_id)
    host.emit('setNumber', {'roomId': room_id, 'number': host_number})
    guest.emit('setNumber', {'roomId': room_id, 'number': guest_number})
    host.get_received()
    guest.get_received()


def test_connect_announces_client_id(host, guest):
    assert host.player_sid
    assert guest.player_sid
    assert host.player_sid != guest.player_sid


def test_create_and_join_room(host, guest):
    host.emit('createRoom', 'ABC')
    assert _received(host) == [('playerCount', [1]), ('yourTurn', [True])]

    guest.emit('joinRoom', 'ABC')
    assert _received(guest) == [('playerCount', [2]), ('yourTurn', [False])]
    assert _received(host) == [('playerCount', [2])]


def test_join_errors(flask_app, socketio, host, guest):
    guest.emit('joinRoom', 'NOPE')
    assert _events(guest, 'error') == [['Oda bulunamadı']]

    host.emit('createRoom', 'ABC')
    guest.emit('joinRoom', 'ABC')
    third = socketio.test_client(flask_app)
    third.get_received()

    third.emit('joinRoom', 'ABC')

    assert _events(third, 'error') == [['Oda dolu']]
    third.disconnect()


def test_game_ready_sets_host_turn(host, guest):
    host.emit('createRoom', 'ABC')
    guest.emit('joinRoom', 'ABC')
    host.get_received()
    guest.get_received()

    host.emit('setNumber', {'roomId': 'ABC', 'number': '1234'})
    assert [name for name, _ in _received(guest)] == ['numberSet']
    host.get_received()

    guest.emit('setNumber', {'roomId': 'ABC', 'number': '5678'})

    host_events = _received(host)
    guest_events = _received(guest)
    assert [name for name, _ in host_events].count('gameReady') == 1
    assert [name for name, _ in guest_events].count('gameReady') == 1
    assert ('yourTurn', [True]) in host_events
    assert ('yourTurn', [False]) in guest_events


def test_guess_out_of_turn(host, guest):
    _start_game(host, guest)

    guest.emit('makeGuess', {'roomId': 'ABC', 'guess': '1234'})

    assert _received(guest) == [('error', ['Sıra sizde değil'])]
    assert _received(host) == []


def test_guess_flow_until_win(flask_app, host, guest):
    _start_game(host, guest)

    host.emit('makeGuess', {'roomId': 'ABC', 'guess': '8765'})
    assert _received(host) == [
        ('yourTurn', [False]),
        ('guessResult', [{'guess': '8765', 'result': '-4'}]),
    ]
    assert _received(guest) == [('yourTurn', [True])]

    guest.emit('makeGuess', {'roomId': 'ABC', 'guess': '1234'})
    winner = {'winner': guest.player_sid}
    assert _received(guest) == [
        ('gameOver', [winner]),
        ('guessResult', [{'guess': '1234', 'result': '+4'}]),
    ]
    assert _received(host) == [('gameOver', [winner])]

    room = flask_app.coordinator.get_room('ABC')
    assert room.game_over is True
    assert room.winner == guest.player_sid

    host.emit('makeGuess', {'roomId': 'ABC', 'guess': '5678'})
    assert _received(host) == []


def test_malformed_payload_is_dropped(flask_app, host):
    host.emit('createRoom', 'ABC')
    host.get_received()

    host.emit('setNumber', '1234')
    host.emit('setNumber', {'roomId': 'ABC'})

    assert _received(host) == []
    assert flask_app.coordinator.get_room('ABC').secrets == {}


def test_disconnect_notifies_remaining_player(flask_app, host, guest):
    host.emit('createRoom', 'ABC')
    guest.emit('joinRoom', 'ABC')
    host.get_received()

    guest.disconnect()

    assert _received(host) == [
        ('playerCount', [1]),
        ('playerDisconnected', [guest.player_sid]),
    ]
    assert flask_app.coordinator.get_room('ABC').players == [host.player_sid]

    host.disconnect()
    assert flask_app.coordinator.get_room('ABC') is None

from trivia.models import PLAYING


def test_last_player_disconnect_removes_room(service, broadcaster):
    room_id = service.join('sid-a', 'Alice')
    service.disconnect('sid-a')
    assert room_id not in service.state.rooms
    assert service.state.player_index == {}
    assert service.lobby_snapshot() == {'rooms': []}
    assert broadcaster.last('game:rooms')[3] == {'rooms': []}


def test_disconnect_updates_roster_and_lobby(service, broadcaster):
    room_id = service.join('sid-a', 'Alice')
    service.join('sid-b', 'Bob')
    broadcaster.clear()
    service.disconnect('sid-a')
    assert broadcaster.last('game:players') == ('room', room_id, 'game:players', {
        'players': [{'name': 'Bob', 'score': 0}],
    })
    assert broadcaster.last('game:rooms')[3]['rooms'][0]['playerCount'] == 1
    assert 'sid-a' not in service.state.player_index


def test_unknown_disconnect_is_noop(service, broadcaster):
    service.disconnect('nobody')
    assert broadcaster.events == []


def test_game_continues_after_player_leaves(service, scheduler, broadcaster):
    room_id = service.join('sid-a', 'Alice')
    service.join('sid-b', 'Bob')
    scheduler.advance(3)
    service.disconnect('sid-b')
    room = service.state.rooms[room_id]
    assert room.status == PLAYING
    scheduler.advance(15)
    assert room.current_question_index == 1
    assert broadcaster.last('game:question')[3]['questionNumber'] == 2


def test_room_emptied_mid_game_is_deleted_and_timers_go_quiet(service, scheduler, broadcaster):
    room_id = service.join('sid-a', 'Alice')
    service.join('sid-b', 'Bob')
    scheduler.advance(3)
    service.disconnect('sid-a')
    service.disconnect('sid-b')
    assert room_id not in service.state.rooms
    broadcaster.clear()
    scheduler.advance(15 * 20)
    assert broadcaster.events == []
    assert scheduler.pending == 0


def test_finished_room_emptied_before_grace_period(service, scheduler):
    room_id = service.join('sid-a', 'Alice')
    service.join('sid-b', 'Bob')
    scheduler.advance(3 + 15 * 10)
    service.disconnect('sid-a')
    assert room_id in service.state.rooms
    service.disconnect('sid-b')
    assert room_id not in service.state.rooms
    # The pending cleanup timer finds nothing to delete
    scheduler.advance(60)
    assert service.state.rooms == {}


def test_leave_unsubscribes_connection(service, broadcaster):
    room_id = service.join('sid-a', 'Alice')
    service.join('sid-b', 'Bob')
    service.leave('sid-a')
    assert broadcaster.subscriptions[room_id] == {'sid-b'}
    assert [p.display_name for p in service.state.rooms[room_id].players] == ['Bob']


def test_lobby_snapshot_is_idempotent(service):
    service.join('sid-a', 'Alice')
    service.join('sid-b', 'Bob')
    assert service.lobby_snapshot() == service.lobby_snapshot()


def test_send_lobby_targets_requester(service, broadcaster):
    room_id = service.join('sid-a', 'Alice')
    broadcaster.clear()
    service.send_lobby('watcher')
    assert broadcaster.events == [('connection', 'watcher', 'game:rooms', {'rooms': [{
        'id': room_id,
        'players': [{'name': 'Alice', 'score': 0}],
        'playerCount': 1,
    }]})]


def test_emptied_room_gets_no_roster_emit(service, broadcaster):
    service.join('sid-a', 'Alice')
    broadcaster.clear()
    service.disconnect('sid-a')
    assert broadcaster.named('game:players') == []
    assert broadcaster.events == [('all', None, 'game:rooms', {'rooms': []})]

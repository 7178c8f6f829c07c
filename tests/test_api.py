import json
import logging

import pytest

EXAMPLE_TWO_WORDS = ["WORLD", "QUITE", "FANCY", "FRESH", "PANIC", "CRAZY", "BUGGY", "HELLO", "SCARE"]


def new_game(client, **payload):
    response = client.post('/api/new_game', json=payload)
    assert response.status_code == 200
    return response.get_json()['game_id']


class TestHttpApi:

    def test_new_game_hides_answer(self, client):
        response = client.post('/api/new_game', json={})
        body = response.get_json()

        assert body['success']
        assert body['state']['game_mode'] == 'host_cheat'
        assert body['state']['max_rounds'] == 6
        assert body['state']['answer'] is None
        assert body['state']['current_round'] == 0

    def test_new_game_options(self, client):
        response = client.post('/api/new_game', json={'max_rounds': 3, 'hard_mode': True})
        state = response.get_json()['state']
        assert state['max_rounds'] == 3
        assert state['hard_mode'] is True

    @pytest.mark.parametrize("payload", [
        {'game_mode': 'absurdle'},
        {'max_rounds': -1},
        {'hard_mode': 'false'},
        {'hard_mode': 'true'},
    ])
    def test_new_game_rejects_bad_options(self, client, payload):
        response = client.post('/api/new_game', json=payload)
        assert response.status_code == 400
        assert not response.get_json()['success']

    def test_full_game(self, app_factory):
        app, _ = app_factory(EXAMPLE_TWO_WORDS)
        client = app.test_client()
        game_id = new_game(client)

        body = client.post(f'/api/game/{game_id}/guess', json={'guess': 'BUGGY'}).get_json()
        assert body['result'] == ['miss'] * 5
        assert body['game_over'] is False
        assert 'answer' not in body

        body = client.post(f'/api/game/{game_id}/guess', json={'guess': 'SCARE'}).get_json()
        assert body['result'] == ['miss', 'miss', 'miss', 'present', 'miss']

        body = client.post(f'/api/game/{game_id}/guess', json={'guess': 'WORLD'}).get_json()
        assert body['result'] == ['hit'] * 5
        assert body['game_over'] is True
        assert body['won'] is True
        assert body['answer'] == 'WORLD'
        assert body['state']['guess_results'][1][3] == ['R', 'present']

        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'HELLO'})
        assert response.status_code == 400
        assert response.get_json()['kind'] == 'AlreadyOver'

    def test_unknown_game_is_not_found(self, client):
        response = client.post('/api/game/nope/guess', json={'guess': 'HELLO'})
        assert response.status_code == 404
        assert response.get_json() == {'success': False, 'error': 'Game not found', 'kind': 'NotFound'}

        assert client.get('/api/game/nope/state').status_code == 404

    def test_invalid_length_is_bad_request(self, client):
        game_id = new_game(client)
        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'AP'})
        assert response.status_code == 400
        assert response.get_json()['kind'] == 'InvalidLength'

        state = client.get(f'/api/game/{game_id}/state').get_json()['state']
        assert state['current_round'] == 0

    def test_missing_guess(self, client):
        game_id = new_game(client)
        response = client.post(f'/api/game/{game_id}/guess', json={})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Guess is required'

    def test_duplicate_guess_in_infinite_mode(self, app_factory):
        app, _ = app_factory(["WORLD"])
        client = app.test_client()
        game_id = new_game(client, game_mode='infinite')

        body = client.post(f'/api/game/{game_id}/guess', json={'guess': 'WORDS'}).get_json()
        assert body['score'] == 9
        assert (body['hit_count'], body['present_count'], body['miss_count']) == (3, 1, 1)

        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'WORDS'})
        assert response.status_code == 400
        assert response.get_json()['kind'] == 'DuplicateGuess'

    def test_hard_mode_violation(self, app_factory):
        app, _ = app_factory(["WORLD"])
        client = app.test_client()
        game_id = new_game(client, hard_mode=True)

        client.post(f'/api/game/{game_id}/guess', json={'guess': 'WORDS'})
        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'DROWN'})
        assert response.status_code == 400
        assert response.get_json()['kind'] == 'InvalidHardModeGuess'

    def test_multi_player_turns(self, app_factory):
        app, _ = app_factory(["WORLD"])
        client = app.test_client()
        game_id = new_game(client, game_mode='multi_player')

        body = client.post(f'/api/game/{game_id}/guess', json={'guess': 'HELLO', 'player_index': 0}).get_json()
        assert body['next_player'] == 1
        assert body['state']['current_player'] == 1

        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'WORLD', 'player_index': 0})
        assert response.status_code == 400
        assert response.get_json()['kind'] == 'NotYourTurn'

        body = client.post(f'/api/game/{game_id}/guess', json={'guess': 'WORLD', 'player_index': 1}).get_json()
        assert body['winner'] == 1
        assert body['answer'] == 'WORLD'
        assert body['state']['guess_players'] == [0, 1]

    def test_revealed_answer_is_logged(self, app_factory, caplog):
        caplog.set_level(logging.INFO, logger='wordle_game')
        app, _ = app_factory(["WORLD"])
        client = app.test_client()
        game_id = new_game(client, game_mode='normal', max_rounds=1)

        client.post(f'/api/game/{game_id}/guess', json={'guess': 'HELLO'})

        entries = [json.loads(record.getMessage()) for record in caplog.records if record.name == 'wordle_game']
        revealed = [entry for entry in entries if entry['action'] == 'answer_revealed']
        assert len(revealed) == 1
        assert revealed[0]['details']['target_word'] == 'WORLD'
        assert revealed[0]['details']['won'] is False

        response = [entry for entry in entries if entry['event_type'] == 'SERVER_RESPONSE_SUCCESS'
                    and entry['action'] == 'submit_guess'][0]
        assert response['details']['resolver_state'] == 'committed'
        assert response['details']['response']['state']['game_mode'] == 'normal'

    def test_delete_game(self, client):
        game_id = new_game(client)
        assert client.delete(f'/api/game/{game_id}').get_json() == {'success': True}
        assert client.delete(f'/api/game/{game_id}').status_code == 404
        assert client.get(f'/api/game/{game_id}/state').status_code == 404

    def test_health(self, client):
        new_game(client)
        body = client.get('/api/health').get_json()
        assert body['status'] == 'healthy'
        assert body['active_games'] == 1
        assert body['word_count'] == 8
        assert {'answers_committed', 'answers_revealed'} <= set(body['log_stats'])


class TestWebSocketApi:

    @staticmethod
    def events(socket_client, name):
        return [event['args'][0] for event in socket_client.get_received() if event['name'] == name]

    def test_submit_guess_broadcasts_result(self, app_factory):
        app, socketio = app_factory(["WORLD"])
        game_id = new_game(app.test_client())

        player = socketio.test_client(app)
        watcher = socketio.test_client(app)
        watcher.emit('join_game', {'game_id': game_id})
        assert self.events(watcher, 'game_state')[0]['state']['game_id'] == game_id

        player.emit('submit_guess', {'game_id': game_id, 'guess': 'world'})

        for socket_client in (player, watcher):
            payload = self.events(socket_client, 'guess_result')[0]
            assert payload['guess'] == 'WORLD'
            assert payload['result'] == ['hit'] * 5
            assert payload['won'] is True
            assert payload['answer'] == 'WORLD'

    def test_errors_go_to_sender(self, app_factory):
        app, socketio = app_factory()
        socket_client = socketio.test_client(app)

        socket_client.emit('submit_guess', {'game_id': 'nope', 'guess': 'HELLO'})
        error = self.events(socket_client, 'error')[0]
        assert error['kind'] == 'NotFound'

        socket_client.emit('join_game', {'game_id': 'nope'})
        assert self.events(socket_client, 'error')[0]['kind'] == 'NotFound'

    def test_missing_fields(self, app_factory):
        app, socketio = app_factory()
        socket_client = socketio.test_client(app)
        socket_client.emit('submit_guess', {'game_id': 'abc'})
        assert self.events(socket_client, 'error')[0]['error'] == 'Game ID and guess are required'

    def test_multi_player_guess_over_socket(self, app_factory):
        app, socketio = app_factory(["WORLD"])
        game_id = new_game(app.test_client(), game_mode='multi_player')
        socket_client = socketio.test_client(app)

        socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'HELLO', 'player_index': 1})
        assert self.events(socket_client, 'error')[0]['kind'] == 'NotYourTurn'

        socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'HELLO', 'player_index': 0})
        payload = self.events(socket_client, 'guess_result')[0]
        assert payload['next_player'] == 1
        assert 'winner' not in payload

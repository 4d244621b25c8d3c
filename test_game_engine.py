"""
Tests for the TicTacToe game engine.
"""

import dataclasses
import threading

import pytest

from game import GameEngine, GameResult, GameState, Mark, Player


def play(engine, positions):
    return [engine.play_at(p) for p in positions]


@pytest.fixture
def engine():
    return GameEngine()


@pytest.fixture
def events(engine):
    received = []
    engine.subscribe(received.append)
    return received


def test_initial_state(engine):
    state = engine.get_state()
    assert state.board == (Mark.EMPTY,) * 9
    assert state.current_player == Player.X
    assert state.result is None
    assert not state.is_game_over


def test_players_alternate_until_game_over(engine):
    players = []
    for position in (4, 0, 8, 2, 6):
        players.append(engine.get_state().current_player)
        assert engine.play_at(position)

    assert players == [Player.X, Player.O, Player.X, Player.O, Player.X]
    assert engine.get_state().board[4] == Mark.X
    assert engine.get_state().board[0] == Mark.O


def test_top_row_win_for_x(engine):
    assert play(engine, [0, 3, 1, 4, 2]) == [True] * 5

    state = engine.get_state()
    assert state.board[:3] == (Mark.X, Mark.X, Mark.X)
    assert state.result == GameResult.X_WINS
    assert state.winner == Player.X
    # Frozen on the winner
    assert state.current_player == Player.X

    assert not engine.play_at(5)
    assert engine.get_state() == state


def test_o_can_win(engine):
    play(engine, [0, 2, 1, 4, 8, 6])
    state = engine.get_state()
    assert state.result == GameResult.O_WINS
    assert state.current_player == Player.O


def test_full_board_without_line_is_draw(engine):
    results = play(engine, [0, 1, 2, 4, 3, 5, 7, 6, 8])

    assert results == [True] * 9
    state = engine.get_state()
    assert state.result == GameResult.DRAW
    assert state.winner is None
    assert all(mark != Mark.EMPTY for mark in state.board)


def test_win_on_last_cell_beats_draw(engine):
    # X completes the 0-4-8 diagonal with the ninth move
    play(engine, [0, 1, 2, 5, 3, 6, 4, 7, 8])
    assert engine.get_state().result == GameResult.X_WINS


def test_occupied_cell_is_rejected(engine, events):
    assert engine.play_at(4)
    before = engine.get_state()

    assert not engine.play_at(4)

    after = engine.get_state()
    assert after == before
    assert after.board[4] == Mark.X
    assert len(events) == 1


@pytest.mark.parametrize("position", [-1, 9, 100, -100])
def test_out_of_range_is_rejected(engine, events, position):
    before = engine.get_state()
    assert not engine.play_at(position)
    assert engine.get_state() == before
    assert events == []


@pytest.mark.parametrize("position", [True, 1.0, "4", None])
def test_non_int_position_is_rejected(engine, position):
    assert not engine.play_at(position)
    assert engine.get_state() == GameState()


def test_cells_never_revert_before_reset(engine):
    seen = set()
    for position in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
        engine.play_at(position)
        board = engine.get_state().board
        filled = {i for i, mark in enumerate(board) if mark != Mark.EMPTY}
        assert seen <= filled
        seen = filled


def test_reset_returns_to_initial_state(engine):
    play(engine, [0, 3, 1, 4, 2])
    engine.reset()
    assert engine.get_state() == GameState()

    assert engine.play_at(0)
    assert engine.get_state().board[0] == Mark.X


def test_reset_twice_is_idempotent(engine, events):
    play(engine, [0, 1])
    engine.reset()
    first = engine.get_state()
    engine.reset()
    second = engine.get_state()

    assert first == second == GameState()
    assert events[-2:] == [GameState(), GameState()]


def test_one_notification_per_change(engine, events):
    engine.play_at(0)
    engine.play_at(0)
    engine.play_at(9)
    engine.play_at(1)
    engine.reset()

    assert len(events) == 3
    assert events[0].board[0] == Mark.X
    assert events[0].current_player == Player.O
    assert events[1].board[1] == Mark.O
    assert events[2] == GameState()


def test_notification_sees_final_state(engine):
    seen = []

    def check(state):
        # Subscribers see the same fully updated state as get_state()
        assert engine.get_state() is state
        seen.append((state.board[2], state.result))

    engine.subscribe(check)
    play(engine, [0, 3, 1, 4, 2])

    assert seen[-1] == (Mark.X, GameResult.X_WINS)


def test_subscribers_run_in_registration_order(engine):
    order = []
    engine.subscribe(lambda state: order.append("a"))
    engine.subscribe(lambda state: order.append("b"))

    engine.play_at(4)

    assert order == ["a", "b"]


def test_unsubscribe_stops_delivery(engine):
    received = []
    unsubscribe = engine.subscribe(received.append)

    engine.play_at(0)
    unsubscribe()
    engine.play_at(1)
    unsubscribe()

    assert len(received) == 1
    assert not engine.unsubscribe(received.append)


def test_unsubscribe_by_callback(engine):
    received = []
    engine.subscribe(received.append)
    callback = received.append

    assert engine.unsubscribe(callback)
    engine.reset()
    assert received == []


def test_same_callback_registered_once(engine):
    received = []

    def callback(state):
        received.append(state)

    engine.subscribe(callback)
    engine.subscribe(callback)
    engine.play_at(0)

    assert len(received) == 1


def test_subscriber_can_call_back_into_engine(engine):
    def reset_when_over(state):
        if state.is_game_over:
            engine.reset()

    engine.subscribe(reset_when_over)
    play(engine, [0, 3, 1, 4, 2])

    assert engine.get_state() == GameState()


def test_later_subscribers_end_on_latest_state(engine):
    seen = []

    def reset_when_over(state):
        if state.is_game_over:
            engine.reset()

    engine.subscribe(reset_when_over)
    engine.subscribe(seen.append)
    play(engine, [0, 3, 1, 4, 2])

    assert seen[-1] == engine.get_state() == GameState()
    # The win still arrives, before the reset it caused
    assert seen[-2].result == GameResult.X_WINS
    assert len(seen) == 6


def test_snapshots_are_immutable(engine):
    engine.play_at(0)
    state = engine.get_state()

    with pytest.raises(dataclasses.FrozenInstanceError):
        state.result = GameResult.DRAW
    with pytest.raises(TypeError):
        state.board[1] = Mark.O

    assert engine.get_state().board[1] == Mark.EMPTY


def test_concurrent_moves_do_not_interleave():
    engine = GameEngine()
    results = []
    barrier = threading.Barrier(9)

    def worker(position):
        barrier.wait()
        results.append(engine.play_at(position))

    threads = [threading.Thread(target=worker, args=(p,)) for p in range(9)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    state = engine.get_state()
    x_count = state.board.count(Mark.X)
    o_count = state.board.count(Mark.O)

    assert results.count(True) == x_count + o_count
    assert x_count - o_count in (0, 1)


def test_debug_prints_rejections(capsys):
    engine = GameEngine(debug=True)
    engine.play_at(4)
    engine.play_at(4)

    out = capsys.readouterr().out
    assert "X played cell 4" in out
    assert "Move rejected: Cell 4 is already occupied by X" in out


def test_quiet_by_default(engine, capsys):
    engine.play_at(4)
    engine.play_at(4)
    assert capsys.readouterr().out == ""

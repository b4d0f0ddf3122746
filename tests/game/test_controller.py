"""Tests for GameEngine — the orchestrator."""

import copy

import pytest

from tictactoe.core.board import Board
from tictactoe.core.enums import Mark, MatchStatus, PlayerId
from tictactoe.game.controller import GameEngine, MatchResult
from tictactoe.game.state import Session

# X O X / X O O / O X X, played in alternating order without completing a line.
DRAW_SEQUENCE = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


def _make_engine(size: int = 3) -> GameEngine:
    """Helper: engine whose clock starts at t=0."""
    return GameEngine(Session.create(size), now=0.0)


def _play(engine: GameEngine, moves: list[tuple[int, int]]) -> None:
    for row, col in moves:
        assert engine.activate_cell(row, col)


def _winning_moves(line: list[tuple[int, int]], size: int) -> list[tuple[int, int]]:
    """Interleave player one's *line* with harmless player two replies."""
    filler = [
        (r, c)
        for r in range(size)
        for c in range(size)
        if (r, c) not in line
        and r != line[0][0]
        and c not in {cell[1] for cell in line[:1]}
    ]
    moves: list[tuple[int, int]] = []
    for i, cell in enumerate(line):
        moves.append(cell)
        if i < len(line) - 1:
            moves.append(filler[i])
    return moves


class TestNewEngine:
    def test_fresh_match(self) -> None:
        engine = _make_engine()
        state = engine.state
        assert state.board == Board.empty(3)
        assert state.current_player == PlayerId.ONE
        assert state.status == MatchStatus.IN_PROGRESS
        assert state.total_games == 0
        assert engine.clock.is_running

    def test_players_assigned(self) -> None:
        engine = _make_engine()
        assert engine.player(PlayerId.ONE).symbol == "X"
        assert engine.player(PlayerId.TWO).symbol == "O"
        assert engine.current_player.player_id == PlayerId.ONE


class TestActivateCell:
    def test_move_places_mark_and_switches_turn(self) -> None:
        engine = _make_engine()
        assert engine.activate_cell(1, 1)
        assert engine.state.board[1, 1] == Mark.X
        assert engine.state.current_player == PlayerId.TWO
        assert engine.activate_cell(0, 0)
        assert engine.state.board[0, 0] == Mark.O
        assert engine.state.current_player == PlayerId.ONE

    def test_previous_board_snapshot_untouched(self) -> None:
        engine = _make_engine()
        before = engine.state.board
        engine.activate_cell(2, 2)
        assert before[2, 2] == Mark.EMPTY
        assert engine.state.board is not before

    def test_occupied_cell_is_noop(self) -> None:
        engine = _make_engine()
        engine.activate_cell(0, 0)
        state_before = copy.deepcopy(engine.state)
        players_before = copy.deepcopy(engine.players)
        assert not engine.activate_cell(0, 0, now=5.0)
        assert engine.state == state_before
        assert engine.players == players_before

    def test_out_of_bounds_is_noop(self) -> None:
        engine = _make_engine()
        state_before = copy.deepcopy(engine.state)
        assert not engine.activate_cell(3, 0)
        assert not engine.activate_cell(-1, 1)
        assert engine.state == state_before

    def test_move_after_game_over_is_noop(self) -> None:
        engine = _make_engine()
        _play(engine, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
        state_before = copy.deepcopy(engine.state)
        players_before = copy.deepcopy(engine.players)
        assert not engine.activate_cell(2, 2)
        assert engine.state == state_before
        assert engine.players == players_before

    def test_move_event_fires(self) -> None:
        engine = _make_engine()
        events: list[tuple[int, int, Mark]] = []
        engine.events.on_move.append(lambda r, c, m, st: events.append((r, c, m)))
        engine.activate_cell(0, 1)
        engine.activate_cell(0, 1)  # rejected, no event
        assert events == [(0, 1, Mark.X)]


class TestWinDetection:
    def test_row_zero_scenario(self) -> None:
        engine = _make_engine()
        _play(engine, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
        assert engine.state.status == MatchStatus.WON
        assert engine.state.winner == PlayerId.ONE
        assert engine.state.is_game_over
        assert not engine.state.clock_active
        assert not engine.clock.is_running

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_row_win(self, size: int) -> None:
        engine = _make_engine(size)
        line = [(size - 1, c) for c in range(size)]
        _play(engine, _winning_moves(line, size))
        assert engine.state.winner == PlayerId.ONE

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_column_win(self, size: int) -> None:
        engine = _make_engine(size)
        line = [(r, 0) for r in range(size)]
        _play(engine, _winning_moves(line, size))
        assert engine.state.status == MatchStatus.WON

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_main_diagonal_win(self, size: int) -> None:
        engine = _make_engine(size)
        line = [(i, i) for i in range(size)]
        _play(engine, _winning_moves(line, size))
        assert engine.state.winner == PlayerId.ONE

    @pytest.mark.parametrize("size", [3, 4, 5])
    def test_anti_diagonal_win(self, size: int) -> None:
        engine = _make_engine(size)
        line = [(i, size - 1 - i) for i in range(size)]
        _play(engine, _winning_moves(line, size))
        assert engine.state.winner == PlayerId.ONE

    def test_second_player_can_win(self) -> None:
        engine = _make_engine()
        _play(engine, [(0, 0), (1, 0), (0, 1), (1, 1), (2, 2), (1, 2)])
        assert engine.state.winner == PlayerId.TWO
        assert engine.player(PlayerId.TWO).wins == 1
        assert engine.player(PlayerId.ONE).wins == 0

    def test_win_increments_only_winner(self) -> None:
        engine = _make_engine()
        _play(engine, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
        assert engine.player(PlayerId.ONE).wins == 1
        assert engine.player(PlayerId.TWO).wins == 0

    def test_match_over_event(self) -> None:
        engine = _make_engine()
        results: list[MatchResult] = []
        engine.events.on_match_over.append(results.append)
        _play(engine, [(0, 0), (1, 1), (0, 1), (1, 0)])
        assert engine.activate_cell(0, 2, now=3.0)
        assert len(results) == 1
        result = results[0]
        assert result.winner == PlayerId.ONE
        assert not result.is_draw
        assert result.match_id == engine.state.match_id
        assert result.winner_time == pytest.approx(engine.player(PlayerId.ONE).time_spent)


class TestDrawDetection:
    def test_full_board_without_line_is_draw(self) -> None:
        engine = _make_engine()
        _play(engine, DRAW_SEQUENCE)
        state = engine.state
        assert state.status == MatchStatus.DRAW
        assert state.is_draw
        assert state.winner is None
        assert not state.clock_active

    def test_draw_leaves_wins_unchanged(self) -> None:
        engine = _make_engine()
        _play(engine, DRAW_SEQUENCE)
        assert engine.player(PlayerId.ONE).wins == 0
        assert engine.player(PlayerId.TWO).wins == 0

    def test_draw_event(self) -> None:
        engine = _make_engine()
        results: list[MatchResult] = []
        engine.events.on_match_over.append(results.append)
        _play(engine, DRAW_SEQUENCE)
        assert results == [
            MatchResult(match_id=0, winner=None, is_draw=True, winner_time=None)
        ]

    def test_win_on_last_cell_is_not_draw(self) -> None:
        engine = _make_engine()
        # X O X / O X O / O X X : the ninth move completes the main diagonal.
        _play(engine, [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 1), (2, 0), (2, 2)])
        assert engine.state.status == MatchStatus.WON
        assert engine.state.winner == PlayerId.ONE


class TestStartNewMatch:
    def test_abandoned_match_not_counted(self) -> None:
        engine = _make_engine()
        engine.activate_cell(0, 0)
        state = engine.start_new_match()
        assert state.total_games == 0
        assert state.board == Board.empty(3)

    def test_completed_match_counted(self) -> None:
        engine = _make_engine()
        _play(engine, DRAW_SEQUENCE)
        assert engine.start_new_match().total_games == 1
        _play(engine, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
        assert engine.start_new_match().total_games == 2

    def test_state_replaced_wholesale(self) -> None:
        engine = _make_engine()
        old = engine.state
        new = engine.start_new_match()
        assert new is not old
        assert new.match_id == old.match_id + 1

    def test_resets_time_keeps_wins(self) -> None:
        engine = _make_engine()
        engine.tick(now=1.0)
        _play(engine, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
        engine.start_new_match(now=10.0)
        assert engine.player(PlayerId.ONE).time_spent == 0.0
        assert engine.player(PlayerId.TWO).time_spent == 0.0
        assert engine.player(PlayerId.ONE).wins == 1
        assert engine.state.current_player == PlayerId.ONE
        assert engine.state.clock_active
        assert engine.clock.is_running

    @pytest.mark.parametrize("size", range(3, 10))
    def test_new_size(self, size: int) -> None:
        engine = _make_engine()
        state = engine.start_new_match(size)
        assert state.board == Board.empty(size)
        assert state.grid_size == size

    def test_size_clamped(self) -> None:
        engine = _make_engine()
        assert engine.start_new_match(1).grid_size == 3
        assert engine.start_new_match(42).grid_size == 9

    def test_new_match_event(self) -> None:
        engine = _make_engine()
        seen: list[int] = []
        engine.events.on_new_match.append(lambda st: seen.append(st.grid_size))
        engine.start_new_match(5)
        assert seen == [5]


class TestPendingGridSize:
    def test_staged_size_does_not_touch_current_match(self) -> None:
        engine = _make_engine()
        engine.activate_cell(0, 0)
        assert engine.set_pending_grid_size(6) == 6
        assert engine.state.grid_size == 3
        assert engine.state.board[0, 0] == Mark.X

    def test_staged_size_used_by_next_match(self) -> None:
        engine = _make_engine()
        engine.set_pending_grid_size(7)
        assert engine.start_new_match().grid_size == 7

    def test_staged_size_clamped(self) -> None:
        engine = _make_engine()
        assert engine.set_pending_grid_size(0) == 3
        assert engine.set_pending_grid_size(15) == 9
        assert engine.pending_grid_size == 9


class TestClockAccrual:
    def test_ticks_credit_current_player(self) -> None:
        engine = _make_engine()
        period = 0.1
        for i in range(1, 21):
            engine.tick(now=period * i)
        assert engine.player(PlayerId.ONE).time_spent == pytest.approx(20 * period)
        assert engine.player(PlayerId.TWO).time_spent == 0.0

    def test_move_boundary_split(self) -> None:
        engine = _make_engine()
        engine.tick(now=0.1)
        engine.activate_cell(1, 1, now=0.15)
        engine.tick(now=0.2)
        assert engine.player(PlayerId.ONE).time_spent == pytest.approx(0.15)
        assert engine.player(PlayerId.TWO).time_spent == pytest.approx(0.05)

    def test_accrual_stops_on_win(self) -> None:
        engine = _make_engine()
        moves = [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)]
        for i, (row, col) in enumerate(moves, start=1):
            engine.activate_cell(row, col, now=float(i))
        one = engine.player(PlayerId.ONE).time_spent
        two = engine.player(PlayerId.TWO).time_spent
        assert one + two == pytest.approx(5.0)
        assert engine.tick(now=50.0) == 0.0
        assert engine.player(PlayerId.ONE).time_spent == one
        assert engine.player(PlayerId.TWO).time_spent == two

    def test_accrual_stops_on_draw(self) -> None:
        engine = _make_engine()
        for i, (row, col) in enumerate(DRAW_SEQUENCE, start=1):
            engine.activate_cell(row, col, now=float(i))
        assert engine.tick(now=100.0) == 0.0
        total = sum(p.time_spent for p in engine.players.values())
        assert total == pytest.approx(9.0)

    def test_new_match_restarts_reference(self) -> None:
        engine = _make_engine()
        engine.tick(now=3.0)
        engine.start_new_match(now=10.0)
        engine.tick(now=10.5)
        assert engine.player(PlayerId.ONE).time_spent == pytest.approx(0.5)


class TestStaleResult:
    def test_result_goes_stale_after_new_match(self) -> None:
        engine = _make_engine()
        results: list[MatchResult] = []
        engine.events.on_match_over.append(results.append)
        _play(engine, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
        assert engine.is_current(results[0])
        engine.start_new_match()
        assert not engine.is_current(results[0])

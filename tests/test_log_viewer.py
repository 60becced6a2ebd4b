"""Tests for the game log viewer script."""

import importlib.util
from pathlib import Path

import pytest

from klondike.game.engine import GameEngine
from klondike.logging import GameLogConfig, GameLogger

from conftest import FixedDeck

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "log_viewer.py"


@pytest.fixture(scope="module")
def log_viewer():
    spec = importlib.util.spec_from_file_location("log_viewer", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def log_path(tmp_path):
    path = tmp_path / "game.jsonl"
    config = GameLogConfig(enabled=True, output_path=str(path))
    with GameLogger(config) as game_logger:
        game_logger.log_session_start()
        engine = GameEngine(FixedDeck(), game_logger)
        engine.process_move("T")
        engine.process_move("D3 1")
        engine.process_move("HQ c")
        engine.process_move("c9 1")
        engine.process_move("N")
        engine.process_move("T")
        game_logger.log_session_end(engine.state.game_number, engine.moves_processed)
    return path


class TestBuildStates:
    """Tests for build_states function."""

    def test_one_state_per_event(self, log_viewer, log_path):
        """Test that every event becomes a displayable state."""
        events = log_viewer.load_events(log_path)
        states = log_viewer.build_states(events)

        assert len(states) == len(events) == 9

    def test_board_tracked(self, log_viewer, log_path):
        """Test board contents after moves."""
        states = log_viewer.build_states(log_viewer.load_events(log_path))

        dealt = states[1]
        assert dealt.game == 1
        assert dealt.move == 0
        assert dealt.stack_top == ""
        assert dealt.columns[6] == ["**"] * 6 + ["HQ"]

        moved = states[3]
        assert moved.last_action == "Move 'D3 1'"
        assert moved.columns[0] == ["sK", "D3"]
        assert moved.stack_top == "D2"
        assert moved.stack_size == 23

        discarded = states[4]
        assert discarded.discards["c"] == "HQ"
        assert discarded.columns[6][-1] == "HK"

        rejected = states[5]
        assert not rejected.accepted
        assert rejected.last_action == "Move 'c9 1' rejected"

        assert states[-1].last_action == "Session ended. Games: 2, moves: 6"

    def test_find_steps(self, log_viewer, log_path):
        """Test jumping to games and moves."""
        states = log_viewer.build_states(log_viewer.load_events(log_path))

        assert log_viewer.find_game_start(states, 2) == 6
        assert log_viewer.find_move(states, 1, 2) == 7
        assert log_viewer.find_game_start(states, 3) is None

    def test_board_lines(self, log_viewer, log_path):
        """Test the text layout used by the viewer."""
        states = log_viewer.build_states(log_viewer.load_events(log_path))

        lines = log_viewer.board_lines(states[3])

        assert lines[0].startswith("Stack  [1]")
        assert lines[1].startswith("D2 23  sK ")
        assert lines[-1] == "Discards: [D] -- [H] -- [c] -- [s] --"

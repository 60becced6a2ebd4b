#!/usr/bin/env python3
"""Interactive log viewer for Klondike game logs.

Usage:
    python scripts/log_viewer.py game_log.jsonl

Keys:
    n: Next step
    p: Previous step
    c: Continuous playback (1 sec interval), any key to stop
    g: Jump to game number
    m: Jump to move number
    q: Quit
"""

import argparse
import curses
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path

SUITS = ["D", "H", "c", "s"]


@dataclass
class BoardState:
    """Current board state for display."""

    game: int = 0
    move: int = 0
    stack_top: str = ""
    stack_size: int = 0
    columns: list[list[str]] = field(default_factory=list)
    discards: dict[str, str] = field(default_factory=dict)
    last_action: str = ""
    accepted: bool = True


def load_events(path: Path) -> list[dict]:
    """Load all events from JSONL file."""
    events = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                events.append(json.loads(line))
    return events


def _apply_board(state: BoardState, board: dict) -> None:
    """Copy a logged board snapshot into the display state."""
    state.stack_top = board.get("stack_top", "")
    state.stack_size = board.get("stack_size", 0)
    state.columns = [c.split(",") if c else [] for c in board.get("columns", [])]
    state.discards = dict(board.get("discards", {}))


def build_states(events: list[dict]) -> list[BoardState]:
    """Build displayable states from events."""
    states: list[BoardState] = []
    current = BoardState()

    for event in events:
        event_type = event.get("type")

        if event_type == "session_start":
            current = BoardState()
            current.last_action = f"Session started {event.get('timestamp', '')}".strip()
            states.append(_copy_state(current))

        elif event_type == "game_start":
            current.game = event.get("game", 0)
            current.move = 0
            current.accepted = True
            _apply_board(current, event.get("board", {}))
            current.last_action = "New game dealt"
            states.append(_copy_state(current))

        elif event_type == "move":
            current.game = event.get("game", current.game)
            current.move = event.get("move", current.move)
            current.accepted = event.get("accepted", False)
            _apply_board(current, event.get("board", {}))

            text = event.get("text", "")
            if current.accepted:
                current.last_action = f"Move {text!r}"
            else:
                current.last_action = f"Move {text!r} rejected"
            states.append(_copy_state(current))

        elif event_type == "session_end":
            games = event.get("total_games", 0)
            moves = event.get("total_moves", 0)
            current.last_action = f"Session ended. Games: {games}, moves: {moves}"
            states.append(_copy_state(current))

    return states


def _copy_state(state: BoardState) -> BoardState:
    """Create a copy of the board state."""
    return BoardState(
        game=state.game,
        move=state.move,
        stack_top=state.stack_top,
        stack_size=state.stack_size,
        columns=[list(c) for c in state.columns],
        discards=dict(state.discards),
        last_action=state.last_action,
        accepted=state.accepted,
    )


def board_lines(state: BoardState) -> list[str]:
    """Lay the board out as text lines, columns side by side."""
    header = "Stack  " + " ".join(f"[{i}]" for i in range(1, 8))
    lines = [header]

    longest = max((len(c) for c in state.columns), default=0)
    for row in range(max(longest, 1)):
        if row == 0:
            prefix = f"{state.stack_top or '  '} {state.stack_size:>2}  "
        else:
            prefix = " " * 7
        cells = []
        for column in state.columns:
            cells.append(f"{column[row]:<3}" if row < len(column) else "   ")
        lines.append(prefix + " ".join(cells))

    discards = " ".join(f"[{s}] {state.discards.get(s) or '--'}" for s in SUITS)
    lines.append("")
    lines.append(f"Discards: {discards}")
    return lines


def draw_screen(stdscr, state: BoardState, step: int, total: int) -> None:
    """Draw the current state to the screen."""
    stdscr.clear()
    height, width = stdscr.getmaxyx()
    width = min(width, 100)

    line = 0
    sep = "=" * 60

    stdscr.addnstr(line, 0, sep, width - 1)
    line += 1

    game_info = f"Game {state.game} / Move {state.move}"
    step_info = f"Step {step + 1}/{total}"
    middle_space = 60 - len(game_info) - len(step_info)
    stdscr.addnstr(line, 0, f"{game_info}{' ' * max(middle_space, 1)}{step_info}", width - 1)
    line += 1

    stdscr.addnstr(line, 0, sep, width - 1)
    line += 2

    stdscr.addnstr(line, 0, f"Last: {state.last_action}", width - 1)
    line += 2

    for text in board_lines(state):
        if line >= height - 2:
            break
        stdscr.addnstr(line, 0, text, width - 1)
        line += 1

    if line < height - 1:
        stdscr.addnstr(line, 0, sep, width - 1)
        line += 1

    help_line = "[n]ext [p]rev [c]ontinuous [g]ame [m]ove [q]uit"
    if line < height:
        stdscr.addnstr(line, 0, help_line, width - 1)

    stdscr.refresh()


def input_number(stdscr, prompt: str) -> int | None:
    """Get a number from the user."""
    height, width = stdscr.getmaxyx()
    stdscr.addnstr(height - 2, 0, prompt, width - 1)
    stdscr.clrtoeol()
    stdscr.refresh()

    curses.echo()
    curses.curs_set(1)
    try:
        inp = stdscr.getstr(height - 2, len(prompt), 10).decode("utf-8")
        return int(inp) if inp.strip() else None
    except (ValueError, curses.error):
        return None
    finally:
        curses.noecho()
        curses.curs_set(0)


def find_game_start(states: list[BoardState], game_num: int) -> int | None:
    """Find the step index for the start of a game."""
    for i, s in enumerate(states):
        if s.game == game_num and s.move == 0:
            return i
    return None


def find_move(states: list[BoardState], move_num: int, current_game: int) -> int | None:
    """Find the step index for a specific move in the current game."""
    for i, s in enumerate(states):
        if s.game == current_game and s.move == move_num:
            return i
    return None


def main_loop(stdscr, states: list[BoardState]) -> None:
    """Main event loop."""
    curses.curs_set(0)
    stdscr.nodelay(False)
    stdscr.timeout(-1)

    step = 0
    total = len(states)

    while True:
        draw_screen(stdscr, states[step], step, total)

        try:
            key = stdscr.getch()
        except curses.error:
            continue

        if key == ord("q"):
            break
        elif key == ord("n"):
            if step < total - 1:
                step += 1
        elif key == ord("p"):
            if step > 0:
                step -= 1
        elif key == ord("c"):
            # Continuous playback
            stdscr.nodelay(True)
            stdscr.timeout(1000)
            while step < total - 1:
                step += 1
                draw_screen(stdscr, states[step], step, total)
                try:
                    k = stdscr.getch()
                    if k != -1:
                        break
                except curses.error:
                    pass
            stdscr.nodelay(False)
            stdscr.timeout(-1)
        elif key == ord("g"):
            num = input_number(stdscr, "Jump to game: ")
            if num is not None:
                idx = find_game_start(states, num)
                if idx is not None:
                    step = idx
        elif key == ord("m"):
            num = input_number(stdscr, "Jump to move: ")
            if num is not None:
                idx = find_move(states, num, states[step].game)
                if idx is not None:
                    step = idx


def main() -> int:
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="Interactive viewer for Klondike game logs"
    )
    parser.add_argument("logfile", type=Path, help="Path to game log file (JSONL)")
    args = parser.parse_args()

    if not args.logfile.exists():
        print(f"Error: File not found: {args.logfile}", file=sys.stderr)
        return 1

    print(f"Loading {args.logfile}...")
    events = load_events(args.logfile)
    print(f"Loaded {len(events)} events")

    print("Building states...")
    states = build_states(events)
    print(f"Built {len(states)} displayable states")

    if not states:
        print("Error: No states to display", file=sys.stderr)
        return 1

    print("Starting viewer...")
    curses.wrapper(lambda stdscr: main_loop(stdscr, states))
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Tests for board rendering."""

import pytest

from klondike.game.renderer import BoardRenderer

HEADER = (
    "ColumnNames   S[T]ack        "
    "[1] [2] [3] [4] [5] [6] [7] [D] [H] [c] [s] "
)
BLANK = "    "


def cells(*values: str) -> str:
    return "".join(v + "  " for v in values)


@pytest.fixture
def renderer():
    return BoardRenderer()


class TestBoardRenderer:
    """Tests for BoardRenderer class."""

    def test_initial_layout(self, renderer, engine):
        """Test the exact board for the unshuffled deal."""
        lines = renderer.render(engine)

        assert lines == [
            HEADER,
            "-" * len(HEADER),
            " " * 19 + "  " + " " * 8
            + cells("sK", "**", "**", "**", "**", "**", "**")
            + "   " * 4,
            " " * 29 + BLANK + cells("sJ", "**", "**", "**", "**", "**"),
            " " * 29 + BLANK * 2 + cells("s8", "**", "**", "**", "**"),
            " " * 29 + BLANK * 3 + cells("s4", "**", "**", "**"),
            " " * 29 + BLANK * 4 + cells("cQ", "**", "**"),
            " " * 29 + BLANK * 5 + cells("c6", "**"),
            " " * 29 + BLANK * 6 + cells("HQ"),
        ]

    def test_row_shape(self, renderer, engine):
        """Test face-down counts per row and card positions."""
        lines = renderer.render(engine)

        assert len(lines) == 9
        assert "**  **  **  **  **  **" in lines[2]
        assert "** **  **  **  **  **  **" not in lines[2]
        assert lines[2][29:31] == "sK"
        assert "**  **  **  **  **" in lines[3]
        assert "**  **  **  **  **  **" not in lines[3]
        assert lines[3][33:35] == "sJ"
        assert "**" not in lines[8]
        assert lines[8][53:55] == "HQ"

    def test_stack_top_and_discards(self, renderer, engine):
        """Test that the top card and discard piles appear on the first row."""
        engine.process_move("T")
        engine.process_move("sK s")
        engine.process_move("HQ D")

        first_row = renderer.render(engine)[2]

        assert first_row[19:21] == "D3"
        assert first_row.endswith(" HQ       sK")

    def test_rows_follow_longest_column(self, renderer, engine):
        """Test that a longer column adds rows."""
        engine.process_move("T")
        engine.process_move("D3 7")

        lines = renderer.render(engine)

        assert len(lines) == 10
        assert lines[9] == " " * 29 + BLANK * 6 + cells("D3")

"""
Tests for the renderers and the keyboard front end.
"""

import subprocess
import sys
from types import SimpleNamespace
from unittest.mock import MagicMock

import numpy as np
import pytest
from matplotlib import pyplot as plt
from matplotlib.colors import to_rgba

import manuals_control
from mergegrid import GameSession, Grid
from mergegrid.utils import render_text
from mergegrid.utils.windows import WindowBoard


class TestRenderText:
    """Tests for the text renderer."""

    def test_layout(self):
        """Fixed-width centred fields, with a header and a score line."""
        text = render_text(np.array([[2, 0, 4], [0, 128, 0], [8, 0, 16]]), 140)
        assert text.splitlines() == [
            'grid:',
            '|  2  |  0  |  4  |',
            '|  0  | 128 |  0  |',
            '|  8  |  0  | 16  |',
            'score: 140',
        ]

    def test_width(self):
        """Every cell field has the requested width."""
        line = render_text(np.array([[2, 4], [8, 16]]), 0, width=7).splitlines()[1]
        assert line == '|   2   |   4   |'


class TestWindowBoard:
    """Tests for the Matplotlib window."""

    @pytest.fixture
    def window(self):
        window = WindowBoard(title='test', size=2)
        yield window
        plt.close('all')

    def test_cells(self, window):
        """One axis and one label per cell."""
        assert len(window.axes) == 4
        assert len(window.texts) == 4

    def test_show_image(self, window):
        """Labels and colours follow the tile values."""
        window.show_image(np.array([[2, 0], [4, 2048]]), score=12)

        assert [text.get_text() for text in window.texts] == ['2', '', '4', '2048']
        assert window.axes[0].get_facecolor() == to_rgba(WindowBoard.COLORS[2])
        assert window.axes[1].get_facecolor() == to_rgba(WindowBoard.COLORS[0])
        assert window.title.get_text() == 'score: 12'

    def test_unknown_tile_color(self, window):
        """Tiles beyond the palette use the default colour."""
        window.show_image(np.array([[65536, 0], [0, 0]]))
        assert window.axes[0].get_facecolor() == to_rgba(WindowBoard.DEFAULT_COLOR)

    def test_close(self, window):
        """Closing marks the window closed."""
        window.close()
        assert window.closed


class TestKeyHandler:
    """Tests for the keyboard front end."""

    def setup_method(self):
        self.session = GameSession(size=4, seed=0, start_tiles=0)
        self.session._grid = Grid.from_tiles([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], seed=0)
        self.window = MagicMock()

    def test_arrow_key_plays(self):
        """Arrow keys play a turn and redraw the grid."""
        manuals_control.key_handler(self.session, self.window, SimpleNamespace(key='left'))

        assert self.session.score == 4
        self.window.show_image.assert_called_once()

    def test_other_keys_are_ignored(self):
        """Unknown keys do nothing."""
        manuals_control.key_handler(self.session, self.window, SimpleNamespace(key='q'))

        assert self.session.score == 0
        self.window.show_image.assert_not_called()

    def test_backspace_restarts(self):
        """Backspace starts a new game."""
        manuals_control.key_handler(self.session, self.window, SimpleNamespace(key='backspace'))

        assert self.session.score == 0
        assert np.count_nonzero(self.session.observation) == 0
        self.window.show_image.assert_called_once()

    def test_escape_closes(self):
        """Escape closes the window."""
        manuals_control.key_handler(self.session, self.window, SimpleNamespace(key='escape'))
        self.window.close.assert_called_once()


class TestImports:
    """Tests for what the engine pulls in at import time."""

    def test_engine_does_not_load_pyplot(self):
        """Importing the engine and its text renderer leaves Matplotlib unloaded."""
        code = 'import sys, mergegrid, mergegrid.utils; print("matplotlib.pyplot" in sys.modules)'
        result = subprocess.run([sys.executable, '-c', code], capture_output=True, text=True, check=True)
        assert result.stdout.strip() == 'False'

"""
Tests for random tile spawning and its configuration.
"""

from collections import Counter

import numpy as np
import pytest

from mergegrid.core import GridFull, InvalidConfiguration, MoveDirection, SpawnConfig, empty_cells, spawn_tile
from mergegrid.core.gameboard import next_state


class ScriptedGenerator:
    """Stand-in generator returning scripted draws."""

    def __init__(self, indices, draws):
        self._indices = list(indices)
        self._draws = list(draws)
        self.calls = []

    def integers(self, high):
        self.calls.append(('integers', high))
        return self._indices.pop(0)

    def random(self):
        self.calls.append(('random',))
        return self._draws.pop(0)


class TestSpawnTile:
    """Tests for one spawn."""

    def test_scripted_outcome(self):
        """The cell is picked among empty cells in row-major order, the value by a Bernoulli draw."""
        board = np.array([[2, 0], [0, 4]])
        rng = ScriptedGenerator(indices=[1], draws=[0.5])

        assert spawn_tile(board, rng) == (1, 0, 2)
        np.testing.assert_array_equal(board, np.array([[2, 0], [2, 4]]))
        assert rng.calls == [('integers', 2), ('random',)]

    def test_four_above_threshold(self):
        """A draw at or above the probability of a 2 gives a 4."""
        board = np.zeros((2, 2), dtype=np.int64)
        assert spawn_tile(board, ScriptedGenerator([0], [0.75]))[2] == 4
        assert spawn_tile(board, ScriptedGenerator([0], [0.7499]))[2] == 2

    def test_adds_exactly_one_tile(self, generator):
        """Exactly one empty cell gets a 2 or a 4; other cells are untouched."""
        board = np.array([[2, 0, 4], [0, 8, 0], [16, 0, 0]])
        for _ in range(50):
            before = board.copy()
            if not empty_cells(board):
                break
            row, col, value = spawn_tile(board, generator)

            assert before[row, col] == 0
            assert board[row, col] == value
            assert value in (2, 4)
            assert np.count_nonzero(board) == np.count_nonzero(before) + 1
            mask = np.ones_like(board, dtype=bool)
            mask[row, col] = False
            np.testing.assert_array_equal(board[mask], before[mask])

    def test_full_board(self, generator):
        """Spawning on a full board fails and leaves it unchanged."""
        board = np.array([[2, 4], [4, 2]])
        with pytest.raises(GridFull):
            spawn_tile(board, generator)
        np.testing.assert_array_equal(board, np.array([[2, 4], [4, 2]]))

    def test_value_distribution(self, generator):
        """About three spawns in four are a 2."""
        values = Counter(spawn_tile(np.zeros((2, 2), dtype=np.int64), generator)[2] for _ in range(4000))
        assert set(values) == {2, 4}
        assert abs(values[2] / 4000 - 0.75) < 0.03

    def test_cell_distribution(self, generator):
        """Every empty cell is picked about as often."""
        cells = Counter(spawn_tile(np.zeros((4, 4), dtype=np.int64), generator)[:2] for _ in range(4000))
        assert len(cells) == 16
        assert all(150 < count < 350 for count in cells.values())

    def test_custom_distribution(self, generator):
        """A probability of 1 only spawns 2s, 0 only 4s."""
        only_twos = SpawnConfig(two_probability=1.0)
        only_fours = SpawnConfig(two_probability=0.0)
        assert {spawn_tile(np.zeros((2, 2), dtype=np.int64), generator, only_twos)[2] for _ in range(100)} == {2}
        assert {spawn_tile(np.zeros((2, 2), dtype=np.int64), generator, only_fours)[2] for _ in range(100)} == {4}

    def test_seed_reproducibility(self):
        """Same seed, same spawns."""
        first = [spawn_tile(np.zeros((4, 4), dtype=np.int64), np.random.default_rng(7)) for _ in range(5)]
        second = [spawn_tile(np.zeros((4, 4), dtype=np.int64), np.random.default_rng(7)) for _ in range(5)]
        assert first == second


class TestSpawnConfig:
    """Tests for the spawn configuration."""

    def test_default(self):
        """Spawns default to a 2 with probability 0.75."""
        assert SpawnConfig().two_probability == 0.75

    @pytest.mark.parametrize('probability', [-0.1, 1.5, float('nan'), float('inf'), '0.5', None, True])
    def test_invalid_probability(self, probability):
        """Malformed probabilities fail at construction."""
        with pytest.raises(InvalidConfiguration):
            SpawnConfig(two_probability=probability)

    def test_invalid_configuration_is_value_error(self):
        """Configuration errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            SpawnConfig(two_probability=2)


class TestNextState:
    """Tests for a full turn: move then spawn."""

    def test_changing_move_spawns_one_tile(self, generator):
        """A move that changes the board is followed by exactly one spawn."""
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result, score, changed = next_state(board, MoveDirection.LEFT, generator)

        assert changed
        assert score == 4
        assert result[0, 0] == 4
        assert np.count_nonzero(result) == 2

    def test_no_op_move_spawns_nothing(self, generator):
        """A move that changes nothing scores nothing and spawns nothing."""
        board = np.array([[2, 0, 0, 0], [4, 0, 0, 0], [8, 0, 0, 0], [16, 0, 0, 0]])
        result, score, changed = next_state(board, MoveDirection.LEFT, generator)

        assert not changed
        assert score == 0
        np.testing.assert_array_equal(result, board)

"""
Tests for noise-driven axis partitions.

Covers:
- Length, endpoints and strict increase
- Worked example from fixed weights
- Degenerate noise fallback
- Division clamping
"""

import numpy as np
import pytest

from src.config import DIVISION_MAX
from src.pattern.noise_field import NoiseField
from src.pattern.spacing import (
    clamp_divisions,
    create_noise_spacing,
    uniform_spacing,
)


class TestPartitionShape:
    """Properties that hold for any valid input."""

    @pytest.mark.parametrize("length", [1.0, 100.0, 437.5, 1920.0])
    @pytest.mark.parametrize("divisions", [1, 2, 6, 13, 20])
    def test_length_endpoints_monotonic(self, length, divisions):
        noise = NoiseField(seed=divisions)
        positions = create_noise_spacing(length, divisions, 12.5, noise)

        assert len(positions) == divisions + 1
        assert positions[0] == 0.0
        assert positions[-1] == pytest.approx(length)
        assert np.all(np.diff(positions) > 0)

    def test_offsets_give_different_partitions(self):
        noise = NoiseField(seed=3)
        rows = create_noise_spacing(300.0, 10, 50.0, noise)
        cols = create_noise_spacing(300.0, 10, 150.0, noise)
        assert not np.allclose(rows, cols)

    def test_samples_at_half_steps(self):
        seen = []

        def noise(coords):
            seen.extend(coords.tolist())
            return np.ones(len(coords))

        create_noise_spacing(10.0, 4, 7.0, noise)
        assert seen == [7.0, 7.5, 8.0, 8.5]


class TestWorkedExample:
    """Weights [0.2, 0.3, 0.1, 0.4] over 100 units."""

    def test_partition(self, fixed_noise):
        positions = create_noise_spacing(100.0, 4, 0.0, fixed_noise([0.2, 0.3, 0.1, 0.4]))
        np.testing.assert_allclose(positions, [0, 20, 50, 60, 100])

    def test_spans(self, fixed_noise):
        positions = create_noise_spacing(100.0, 4, 0.0, fixed_noise([0.2, 0.3, 0.1, 0.4]))
        np.testing.assert_allclose(np.diff(positions), [20, 30, 10, 40])


class TestDegenerateNoise:
    """Zero weights fall back to a uniform partition."""

    def test_all_zero_weights(self, fixed_noise):
        positions = create_noise_spacing(100.0, 4, 0.0, fixed_noise([0, 0, 0, 0]))
        np.testing.assert_allclose(positions, [0, 25, 50, 75, 100])

    def test_single_zero_weight(self, fixed_noise):
        positions = create_noise_spacing(90.0, 3, 0.0, fixed_noise([0.5, 0.0, 0.5]))
        np.testing.assert_allclose(positions, [0, 30, 60, 90])

    def test_nan_weights(self, fixed_noise):
        positions = create_noise_spacing(10.0, 2, 0.0, fixed_noise([np.nan, 0.5]))
        np.testing.assert_allclose(positions, [0, 5, 10])


class TestValidation:

    def test_non_positive_length(self):
        with pytest.raises(ValueError):
            create_noise_spacing(0.0, 4, 0.0, NoiseField(seed=1))

    def test_divisions_clamped_high(self):
        positions = create_noise_spacing(100.0, 50, 0.0, NoiseField(seed=1))
        assert len(positions) == DIVISION_MAX + 1

    def test_divisions_clamped_low(self):
        positions = create_noise_spacing(100.0, 0, 0.0, NoiseField(seed=1))
        np.testing.assert_allclose(positions, [0, 100])

    @pytest.mark.parametrize("raw,expected", [(-3, 1), (0, 1), (1, 1), (20, 20), (21, 20)])
    def test_clamp_divisions(self, raw, expected):
        assert clamp_divisions(raw) == expected


class TestUniformSpacing:

    def test_even_cells(self):
        np.testing.assert_allclose(uniform_spacing(60.0, 3), [0, 20, 40, 60])

    def test_rejects_bad_length(self):
        with pytest.raises(ValueError):
            uniform_spacing(-1.0, 3)

"""Unit tests for visualization plotters."""

from unittest.mock import patch

import numpy as np
import pytest

from numapprox.algorithms.inverse_fft import ifft
from numapprox.algorithms.newton_polynomial import NewtonPolynomial
from numapprox.visualization.plotters import InterpolantVisualizer


class TestInterpolantVisualizer:
    """Test cases for InterpolantVisualizer."""
    def test_initialization_does_not_create_directory(self, tmp_path):
        """Test that the output directory is created lazily."""
        visualizer = InterpolantVisualizer(tmp_path / "plots")
        assert not (tmp_path / "plots").exists()
        assert visualizer.saved_plots == []

    def test_plot_interpolant(self, tmp_path, sine_samples):
        """Test that an interpolant plot is written."""
        x, y = sine_samples
        visualizer = InterpolantVisualizer(tmp_path)
        path = visualizer.plot_interpolant(NewtonPolynomial(x, y), "sine fit", x, y,
                                           reference=np.sin, num_points=50)
        assert path == tmp_path / "sine_fit.png"
        assert path.exists()
        assert visualizer.saved_plots == [path]

    def test_plot_single_sample(self, tmp_path):
        """Test that a zero-width sample range is padded."""
        visualizer = InterpolantVisualizer(tmp_path)
        path = visualizer.plot_interpolant(NewtonPolynomial([1.0], [2.0]), "constant", [1.0], [2.0],
                                           num_points=10)
        assert path.exists()

    def test_plot_without_samples(self, tmp_path):
        """Test that an empty sample set cannot be plotted."""
        visualizer = InterpolantVisualizer(tmp_path)
        with pytest.raises(ValueError, match="without sampling points"):
            visualizer.plot_interpolant(NewtonPolynomial([1.0], [2.0]), "empty", [], [])

    def test_plot_spectrum(self, tmp_path):
        """Test that a complex sequence plot is written."""
        visualizer = InterpolantVisualizer(tmp_path)
        path = visualizer.plot_spectrum(ifft([0, 1, 0, 0]), "twiddles")
        assert path.exists()

    @patch('matplotlib.figure.Figure.savefig', side_effect=OSError("disk full"))
    def test_save_failure_propagates(self, mock_savefig, tmp_path):
        """Test that errors while saving are raised."""
        visualizer = InterpolantVisualizer(tmp_path)
        with pytest.raises(OSError, match="disk full"):
            visualizer.plot_spectrum([1, 2], "fail")
        assert visualizer.saved_plots == []

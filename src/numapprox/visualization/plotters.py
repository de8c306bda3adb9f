import logging
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np

from numapprox.core.interfaces import InterpolationMethod
from numapprox.core.typedefs import ArrayTypes, ComplexLike
from numapprox.data.constants import NumericalConstants

logger = logging.getLogger(__name__)


class InterpolantVisualizer:
    """Plots interpolants and transform outputs to PNG files."""

    # --- Constructor ---
    def __init__(self, output_dir: Union[str, Path] = "numapprox_plots") -> None:
        self.plot_directory = Path(output_dir)
        self.saved_plots = []
        self.setup_style()
        logger.debug("InterpolantVisualizer initialized with output directory: %s", self.plot_directory)

    @staticmethod
    def setup_style() -> None:
        plt.rcParams.update({
            'font.size': 10,
            'axes.titlesize': 12,
            'axes.labelsize': 10,
            'legend.fontsize': 9,
            'axes.grid': True,
            'grid.alpha': 0.3,
            'grid.linestyle': '--',
            'axes.axisbelow': True,
            'figure.facecolor': 'white',
            'savefig.dpi': 150,
        })

    # --- Public API Methods ---
    def plot_interpolant(self, method: InterpolationMethod, name: str,
                         x_samples: ArrayTypes, y_samples: ArrayTypes,
                         reference: Optional[Callable[[np.ndarray], np.ndarray]] = None,
                         num_points: int = NumericalConstants.DEFAULT_VISUALIZATION_POINTS) -> Path:
        """
        Plot an interpolant over its sample range.
        Args:
            method: Initialized interpolation method
            name: Title and file stem of the plot
            x_samples: Sampling points drawn as markers
            y_samples: Sample values drawn as markers
            reference: Optional exact function drawn for comparison
            num_points: Number of evaluation points
        Returns:
            Path of the saved PNG file
        """
        x_samples = np.asarray(x_samples, dtype=float)
        y_samples = np.asarray(y_samples, dtype=float)
        if x_samples.size == 0:
            raise ValueError("Cannot plot an interpolant without sampling points")
        lower, upper = float(np.min(x_samples)), float(np.max(x_samples))
        padding = (upper - lower) * NumericalConstants.RANGE_PADDING_FACTOR
        if padding == 0:
            padding = 1.0
        z = np.linspace(lower - padding, upper + padding, num_points)
        logger.info("Plotting interpolant '%s' (%s) with %d sampling points",
                    name, type(method).__name__, x_samples.size)
        fig, ax = plt.subplots(figsize=(8, 5))
        try:
            ax.plot(z, method.evaluate(z), label=type(method).__name__, linewidth=1.5)
            if reference is not None:
                ax.plot(z, reference(z), linestyle='--', color='gray', label='reference')
            ax.scatter(x_samples, y_samples, color='red', zorder=3, label='sampling points')
            ax.set_title(name)
            ax.set_xlabel('x')
            ax.set_ylabel('p(x)')
            ax.legend(loc='best')
            return self._save(fig, name)
        finally:
            plt.close(fig)

    def plot_spectrum(self, values: Sequence[ComplexLike], name: str) -> Path:
        """Plot real and imaginary parts of a complex sequence against its index."""
        data = np.array([complex(value) for value in values], dtype=np.complex128)
        logger.info("Plotting complex sequence '%s' of length %d", name, data.size)
        fig, ax = plt.subplots(figsize=(8, 5))
        try:
            index = np.arange(data.size)
            ax.stem(index, data.real, linefmt='C0-', markerfmt='C0o', basefmt=' ', label='real')
            ax.stem(index, data.imag, linefmt='C1--', markerfmt='C1s', basefmt=' ', label='imag')
            ax.set_title(name)
            ax.set_xlabel('index')
            ax.legend(loc='best')
            return self._save(fig, name)
        finally:
            plt.close(fig)

    def _save(self, fig, name: str) -> Path:
        self.plot_directory.mkdir(parents=True, exist_ok=True)
        file_stem = "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in name)
        path = self.plot_directory / f"{file_stem}.png"
        try:
            fig.savefig(path, bbox_inches='tight')
        except Exception as e:
            logger.error("Failed to save plot %s: %s", path, e, exc_info=True)
            raise
        self.saved_plots.append(path)
        logger.debug("Plot saved to %s", path)
        return path

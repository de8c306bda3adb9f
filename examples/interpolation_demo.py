"""Demonstration script for Newton interpolation and the inverse FFT."""
import logging
from pathlib import Path

import matplotlib
import numpy as np

from numapprox import NewtonPolynomial, LinearInterpolation, ifft
from numapprox.visualization.plotters import InterpolantVisualizer


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Silence noisy libraries
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)


def setup_plotting():
    """Render plots to files only."""
    matplotlib.use('Agg')


def demonstrate_newton():
    """Build a Newton polynomial and extend it by one point."""
    newton = NewtonPolynomial([1.0, 3.0], [-2.0, -2.0])
    print(f"\n{'=' * 80}")
    print("NEWTON INTERPOLATION")
    print(f"{'=' * 80}")
    print(f"Coefficients:         {newton.get_coefficients()}")
    newton.add_sampling_point(1.5, 5.0)
    print("After adding (1.5, 5.0):")
    print(f"  Coefficients:       {newton.get_coefficients()}")
    print(f"  Divided differences: {newton.get_divided_differences()}")
    print(f"  p(4) = {newton.evaluate(4.0)}")
    print(f"  p(x) = {newton.as_expr()}")


def demonstrate_methods(plot_dir: Path):
    """Compare interpolation methods on Runge's function."""
    runge = lambda t: 1.0 / (1.0 + 25.0 * t ** 2)
    x = np.linspace(-1.0, 1.0, 11)
    y = runge(x)
    visualizer = InterpolantVisualizer(plot_dir)
    for method in (NewtonPolynomial(), LinearInterpolation()):
        method.init_uniform(-1.0, 1.0, 10, y)
        z = np.linspace(-1.0, 1.0, 201)
        error = np.max(np.abs(method.evaluate(z) - runge(z)))
        print(f"{type(method).__name__:<20} max error on [-1, 1]: {error:.4e}")
        visualizer.plot_interpolant(method, f"runge_{type(method).__name__}", x, y, reference=runge)


def demonstrate_ifft():
    """Inverse transform of a short spectrum."""
    print(f"\n{'=' * 80}")
    print("INVERSE FFT")
    print(f"{'=' * 80}")
    spectrum = [0, 1, 0, 0, 0, 0, 0, 1]
    for j, value in enumerate(ifft(spectrum, normalize=True)):
        print(f"  v[{j}] = {value}")


if __name__ == "__main__":
    setup_logging()
    setup_plotting()
    demonstrate_newton()
    demonstrate_methods(Path(__file__).parent / "numapprox_plots")
    demonstrate_ifft()

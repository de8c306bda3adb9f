"""Tests for the example scripts."""
import importlib.util
from pathlib import Path

import matplotlib

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def load_example(name):
    spec = importlib.util.spec_from_file_location(name, EXAMPLES_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_demo_selects_file_backend():
    """Test that the interpolation demo renders without a display."""
    demo = load_example("interpolation_demo")
    demo.setup_plotting()
    assert matplotlib.get_backend().lower() == "agg"


def test_demo_runs(tmp_path, capsys):
    """Test that the demo steps run and write their plots."""
    demo = load_example("interpolation_demo")
    demo.setup_plotting()
    demo.demonstrate_newton()
    demo.demonstrate_methods(tmp_path)
    demo.demonstrate_ifft()
    assert "p(4) = -30" in capsys.readouterr().out
    assert len(list(tmp_path.glob("*.png"))) == 2

# test_imports.py


def test_all_imports():
    """Test that all modules can be imported without circular dependencies."""
    from numapprox.core.complex_value import Complex
    from numapprox.core.interfaces import InterpolationMethod
    from numapprox.validation.array_validator import validate_sample_set
    from numapprox.algorithms.newton_polynomial import NewtonPolynomial
    from numapprox.algorithms.inverse_fft import ifft
    from numapprox.visualization.plotters import InterpolantVisualizer
    from numapprox.utils.archive import zip_files

    assert issubclass(NewtonPolynomial, InterpolationMethod)
    assert callable(ifft) and callable(zip_files) and callable(validate_sample_set)
    assert Complex and InterpolantVisualizer

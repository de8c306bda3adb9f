"""Pack the numapprox algorithm sources into a zip archive."""
import logging
from pathlib import Path

from numapprox.utils.archive import zip_files

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    package_dir = Path(__file__).parent.parent / "src" / "numapprox"
    files = [
        package_dir / "algorithms" / "newton_polynomial.py",
        package_dir / "algorithms" / "linear_interpolation.py",
        package_dir / "algorithms" / "inverse_fft.py",
        package_dir / "core" / "complex_value.py",
    ]
    archive = zip_files(files, Path.cwd() / "numapprox_sources.zip")
    print(f"Done... Zipped the files into {archive}")

import logging
import zipfile
from pathlib import Path
from typing import Iterable, Union

from numapprox.data.constants import FileConstants

logger = logging.getLogger(__name__)


def zip_files(files: Iterable[Union[str, Path]],
              archive_path: Union[str, Path] = FileConstants.DEFAULT_ARCHIVE_NAME) -> Path:
    """
    Pack several files into a single deflated zip archive.
    Args:
        files: Paths of the files to archive; each entry is named by the file's base name
        archive_path: Path of the archive to create (overwritten if present)
    Returns:
        Path of the written archive
    Raises:
        FileNotFoundError: If one of the files does not exist; no archive is written then
        ValueError: If a path is not a regular file
    """
    paths = [Path(f) for f in files]
    for path in paths:
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise ValueError(f"Path is not a file: {path}")
    archive_path = Path(archive_path)
    logger.info("Creating archive %s with %d files", archive_path, len(paths))
    try:
        with zipfile.ZipFile(archive_path, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
            for path in paths:
                logger.info("Zipping the file: %s", path.name)
                with path.open('rb') as source, archive.open(path.name, 'w') as target:
                    while True:
                        chunk = source.read(FileConstants.ARCHIVE_CHUNK_SIZE)
                        if not chunk:
                            break
                        target.write(chunk)
    except OSError as e:
        logger.error("Failed to write archive %s: %s", archive_path, e, exc_info=True)
        raise
    logger.info("Archive written: %s", archive_path)
    return archive_path

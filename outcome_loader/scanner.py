"""Find serialized outcome files in a report directory."""

from collections.abc import Sequence
from pathlib import Path

from outcome_loader.errors import DirectoryNotFoundError
from outcome_loader.formats import OutcomeFormat


def find_outcome_files(directory: Path, fmt: OutcomeFormat) -> Sequence[Path]:
    """List the files directly inside a directory that are in a format.

    The extension is compared case-insensitively. Files are returned in
    filesystem listing order, which is not sorted.

    Raises:
        DirectoryNotFoundError: If the directory is missing, is not a
            directory, or it or its entries cannot be read

    """
    try:
        return [
            entry
            for entry in directory.iterdir()
            if fmt.matches(entry.name) and entry.is_file()
        ]
    except OSError as e:
        raise DirectoryNotFoundError(directory) from e

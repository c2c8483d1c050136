"""Datasets made of a base cell and its numbered update cells.

A dataset is identified by a directory and a family name. Its base cell is
``<family>.000``, and its update cells are ``<family>.001`` up to
``<family>.999``, kept in ascending order of update number.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .textconv import to_long

BASE_CELL_EXTENSION = "000"
MAX_UPDATE_NUMBER = 999


class DatasetItem:
    """A base cell together with the update cells that belong to it."""

    def __init__(self, path_name: str) -> None:
        """Build from a file path and name given without an extension."""
        self.is_alive = True
        slash = path_name.rfind("/")
        if slash >= 0:
            self.path = path_name[: slash + 1]
            self.family = path_name[slash + 1:]
        else:
            self.path = ""
            self.family = path_name
        self._update_numbers: list[int] = []

    def __repr__(self) -> str:
        return (
            f"DatasetItem({self.path + self.family!r}, "
            f"updates={self._update_numbers!r})"
        )

    @property
    def update_numbers(self) -> list[int]:
        """Update numbers in ascending order."""
        return list(self._update_numbers)

    def ds_file(self) -> str:
        """Return the file name of the base cell."""
        return f"{self.path}{self.family}.{BASE_CELL_EXTENSION}"

    def insert_update_cell(self, file_name: str) -> bool:
        """Register ``file_name`` as an update cell of this dataset.

        Returns False when the file belongs to another dataset. Raises
        ``ValueError`` for a file without an extension, an update number
        outside 1..999, or an update number already registered.
        """
        dot = file_name.rfind(".")
        if dot < 0:
            raise ValueError(f"file has no extension: {file_name!r}")
        if file_name[:dot] != self.path + self.family:
            return False

        extension = file_name[dot + 1: dot + 4]
        try:
            num = to_long(extension)
        except ValueError:
            raise ValueError(f"invalid update cell extension: {file_name!r}") from None
        if not 0 < num <= MAX_UPDATE_NUMBER:
            raise ValueError(f"update number out of range: {file_name!r}")
        if num in self._update_numbers:
            raise ValueError(f"update cell already registered: {file_name!r}")

        index = next(
            (i for i, existing in enumerate(self._update_numbers) if num < existing),
            len(self._update_numbers),
        )
        self._update_numbers.insert(index, num)
        return True

    def update_count(self) -> int:
        """Return the number of registered update cells."""
        return len(self._update_numbers)

    def update_files(self) -> Iterator[tuple[int, str]]:
        """Yield ``(number, file name)`` for each update cell in ascending order."""
        for num in self._update_numbers:
            yield num, f"{self.path}{self.family}.{num:03d}"


def dispatch_update_cells(
    datasets: Iterable[DatasetItem], update_cells: Iterable[str]
) -> list[str]:
    """Hand each update cell to the dataset it belongs to.

    Returns the update cells that no dataset accepted, in their original order.
    """
    targets = list(datasets)
    isolated = []
    for cell in update_cells:
        if not any(ds.insert_update_cell(cell) for ds in targets):
            isolated.append(cell)
    return isolated


def split_dataset_path(filepath: str) -> tuple[str, str]:
    """Split a dataset file path into its directory and family name.

    The directory keeps its trailing '/', or is '.' when the path has none.
    The family name runs from the last '/' up to the first following '.'.
    """
    slash = filepath.rfind("/")
    if slash >= 0:
        start = slash + 1
        directory = filepath[:start]
    else:
        start = 0
        directory = "."
    dot = filepath.find(".", start)
    basename = filepath[start:dot] if dot >= 0 else filepath[start:]
    return directory, basename
"""Reference data structures shared by all transit networks.

Station lists and fare matrices are built once when a network module is
imported and never mutated afterwards, so they can be shared freely.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence


@dataclass(frozen=True)
class Station:
    """Station reference entity.

    ``name`` is the local-script name and the primary lookup key, ``name_en``
    the English name. ``code`` is unique within one network.
    """

    code: str
    name: str
    name_en: str
    line: str
    transfer_lines: tuple[str, ...] = ()
    is_express: bool = False


class FareMatrix:
    """Square, symmetric, zero-diagonal table of point-to-point fares."""

    def __init__(self, rows: Sequence[Sequence[int]]):
        """Validate and freeze a fare matrix.

        Args:
            rows: Matrix rows, indexed by station position

        Raises:
            ValueError: If the matrix is not square, symmetric, non-negative
                or has a non-zero diagonal
        """
        self._rows = tuple(tuple(row) for row in rows)
        size = len(self._rows)
        for i, row in enumerate(self._rows):
            if len(row) != size:
                raise ValueError(f"Fare matrix row {i} has {len(row)} entries, expected {size}")
            if row[i] != 0:
                raise ValueError(f"Fare matrix diagonal at {i} is {row[i]}, expected 0")
            for j, fare in enumerate(row):
                if fare < 0:
                    raise ValueError(f"Negative fare at ({i}, {j})")
                if fare != self._rows[j][i]:
                    raise ValueError(f"Fare matrix is not symmetric at ({i}, {j})")

    @classmethod
    def from_rule(cls, size: int, rule: Callable[[int, int], int]) -> "FareMatrix":
        """Materialise a matrix from a pairwise fare rule."""
        return cls([[0 if i == j else rule(i, j) for j in range(size)] for i in range(size)])

    def __len__(self) -> int:
        return len(self._rows)

    def fare(self, from_index: int, to_index: int) -> int:
        """Get the fare between two station positions."""
        return self._rows[from_index][to_index]

    def rows(self) -> tuple[tuple[int, ...], ...]:
        """Get the matrix rows."""
        return self._rows


class StationTable:
    """Ordered station list with name and code indexes.

    Interchange stations can appear more than once under the same name (one
    entry per line). Name lookups resolve to the first entry.
    """

    def __init__(self, stations: Sequence[Station]):
        self.stations = tuple(stations)
        self._index_by_name: dict[str, int] = {}
        self._index_by_code: dict[str, int] = {}
        for index, station in enumerate(self.stations):
            if station.code in self._index_by_code:
                raise ValueError(f"Duplicate station code '{station.code}'")
            self._index_by_code[station.code] = index
            self._index_by_name.setdefault(station.name, index)
            self._index_by_name.setdefault(station.name_en.casefold(), index)

    def __len__(self) -> int:
        return len(self.stations)

    def __iter__(self):
        return iter(self.stations)

    def index_of(self, name: str) -> Optional[int]:
        """Get the table position for a station name (local or English)."""
        if not name:
            return None
        index = self._index_by_name.get(name)
        if index is None:
            index = self._index_by_name.get(name.strip().casefold())
        return index

    def index_of_code(self, code: str) -> Optional[int]:
        """Get the table position for a station code."""
        return self._index_by_code.get(code)

    def resolve(self, name: str) -> Optional[Station]:
        """Resolve a station name to its station, or None if unknown."""
        index = self.index_of(name)
        if index is None:
            return None
        return self.stations[index]

    def get_by_code(self, code: str) -> Optional[Station]:
        """Get station by code."""
        index = self.index_of_code(code)
        if index is None:
            return None
        return self.stations[index]

    def search(self, query: str) -> list[Station]:
        """Search stations by local name, English name or code."""
        lowered = query.strip().casefold()
        if not lowered:
            return list(self.stations)
        return [
            station
            for station in self.stations
            if query.strip() in station.name
            or lowered in station.name_en.casefold()
            or lowered in station.code.casefold()
        ]


@dataclass(frozen=True)
class Network:
    """A transit network: its stations and its station-pair fare function.

    ``fare`` takes two station names and returns the fare in whole NT$, or 0
    when either name cannot be resolved.
    """

    key: str
    label: str
    stations: StationTable
    fare: Callable[[str, str], int]
    matrix: Optional[FareMatrix] = None
    lines: tuple[tuple[str, str], ...] = ()

    def line_name(self, code: str) -> str:
        """Return the display name of a line code, or the code if unlisted."""
        return dict(self.lines).get(code, code)


def matrix_fare(stations: StationTable, matrix: FareMatrix) -> Callable[[str, str], int]:
    """Build a station-name fare lookup over a fare matrix.

    Unknown station names yield 0.
    """
    if len(stations) != len(matrix):
        raise ValueError(
            f"Station list has {len(stations)} entries but fare matrix has {len(matrix)}"
        )

    def fare(from_station: str, to_station: str) -> int:
        from_index = stations.index_of(from_station)
        to_index = stations.index_of(to_station)
        if from_index is None or to_index is None:
            return 0
        return matrix.fare(from_index, to_index)

    return fare

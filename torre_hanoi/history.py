"""Records of finished games, kept in a plain text file."""

from __future__ import annotations

import re
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

MAX_NAME_LENGTH = 50
HISTORY_FILE = "historico_partidas.txt"

_DATE_FORMAT = "%d/%m/%Y"
_DATETIME_FORMAT = "%d/%m/%Y %H:%M:%S"
_LINE = re.compile(
    r"\s*([+-]?\d+);([^;]{1,%d});\s*([+-]?\d+);\s*([+-]?\d+)" % (MAX_NAME_LENGTH - 1)
)


@dataclass
class GameRecord:
    """One won game: moves made, player, discs and finishing time (epoch seconds)."""

    moves: int
    player_name: str
    num_discs: int
    finished_at: int

    def __post_init__(self) -> None:
        self.player_name = self.player_name[: MAX_NAME_LENGTH - 1]

    def to_line(self) -> str:
        """Serialise as a history file line, without the newline."""
        return f"{self.moves};{self.player_name};{self.num_discs};{self.finished_at}"

    @classmethod
    def from_line(cls, line: str) -> GameRecord:
        """Parse a history file line; raise ValueError if it is malformed."""
        match = _LINE.match(line)
        if match is None:
            raise ValueError(f"malformed history line: {line!r}")
        moves, name, discs, finished = match.groups()
        return cls(int(moves), name, int(discs), int(finished))

    def describe(self, label: str = "Data") -> str:
        """Return a one-line description with the time shown under the given label."""
        when = time.strftime(_DATETIME_FORMAT, time.localtime(self.finished_at))
        return (
            f"Jogador: {self.player_name}, Discos: {self.num_discs}, "
            f"Movimentos: {self.moves}, {label}: {when}"
        )

    def local_date(self) -> str:
        return time.strftime(_DATE_FORMAT, time.localtime(self.finished_at))


class History:
    """Game records, most recently added first."""

    def __init__(self, records: Iterable[GameRecord] = ()) -> None:
        self._records: list[GameRecord] = list(records)

    def add(
        self,
        moves: int,
        player_name: str,
        num_discs: int,
        finished_at: int | None = None,
    ) -> GameRecord:
        """Record a game at the front of the history, timestamped now by default."""
        if finished_at is None:
            finished_at = int(time.time())
        record = GameRecord(moves, player_name, num_discs, finished_at)
        self._records.insert(0, record)
        return record

    def save(self, path: str | Path = HISTORY_FILE) -> None:
        """Write every record, one per line, in the current order."""
        with open(path, "w", encoding="utf-8") as handle:
            for record in self._records:
                handle.write(record.to_line() + "\n")

    @classmethod
    def load(cls, path: str | Path = HISTORY_FILE) -> History:
        """Read a history file, skipping malformed lines; a missing file gives an empty history.

        Each line read is added to the front, so the order comes out reversed.
        """
        history = cls()
        try:
            handle = open(path, encoding="utf-8")
        except FileNotFoundError:
            return history
        with handle:
            for line in handle:
                try:
                    record = GameRecord.from_line(line)
                except ValueError:
                    continue
                history._records.insert(0, record)
        return history

    def search_by_name(self, term: str) -> list[GameRecord]:
        """Records whose player name contains the term."""
        return [record for record in self._records if term in record.player_name]

    def search_by_date(self, date_text: str) -> list[GameRecord]:
        """Records finished on the given local date, written DD/MM/YYYY."""
        return [record for record in self._records if record.local_date() == date_text]

    def render(self) -> str:
        """The whole history as text."""
        if not self._records:
            return "Nenhum historico de partida encontrado.\n"
        lines = ["", " Historico de Partidas "]
        lines.extend(record.describe("Data") for record in self._records)
        return "\n".join(lines) + "\n"

    def __iter__(self) -> Iterator[GameRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
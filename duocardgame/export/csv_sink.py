"""CSV export of round snapshots."""

import csv
import logging
from pathlib import Path
from typing import Union

from duocardgame.engine.snapshot import RoundSnapshot

logger = logging.getLogger(__name__)

DEFAULT_CSV_PATH = "Files/game_status.csv"


class CsvSnapshotSink:
    """Writes one row per round to a CSV file.

    The first record truncates the file and writes a ``Round,<names>``
    header; later records append. The record that ends the game is followed
    by a ``Winner,<name>`` row.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_CSV_PATH):
        self.path = Path(path)
        self._first = True

    def record(self, snapshot: RoundSnapshot) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        mode = "w" if self._first else "a"
        with self.path.open(mode, newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh)
            if self._first:
                writer.writerow(["Round", *snapshot.player_names])
                self._first = False
            writer.writerow([f"Round {snapshot.round_number}", *(s for _, s in snapshot.scores)])
            if snapshot.game_winner is not None:
                writer.writerow(["Winner", snapshot.game_winner])
        logger.debug("Wrote round %d to %s", snapshot.round_number, self.path)

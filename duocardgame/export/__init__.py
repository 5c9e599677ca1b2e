"""Round snapshot exporters."""

from duocardgame.export.csv_sink import DEFAULT_CSV_PATH, CsvSnapshotSink

__all__ = ["CsvSnapshotSink", "DEFAULT_CSV_PATH"]

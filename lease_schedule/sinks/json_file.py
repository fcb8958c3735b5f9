"""JSON file sink for exporting records to files."""

import json
from pathlib import Path
from typing import Any

from lease_schedule.sinks.serialization import to_dict


class JsonFileSink:
    """Output records to JSON files, one file per entity type."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._records: dict[str, list[dict]] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Append a batch to ``<entity_type>.json``.

        Batches for the same entity type accumulate; the file is rewritten
        with every record written so far.
        """
        data = self._records.setdefault(entity_type, [])
        data.extend(to_dict(record) for record in records)

        file_path = self.output_dir / f"{entity_type}.json"
        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for entity_type, data in self._records.items():
            print(f"  {entity_type}: {len(data)} records")

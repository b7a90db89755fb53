"""Export backends for parsed spec packages."""

from rpmspec_parser.exporters.base import Exporter
from rpmspec_parser.exporters.json_export import JSONExporter
from rpmspec_parser.exporters.sqlite import SQLiteExporter


def get_exporter(format_name: str, output_dir: str) -> Exporter:
    """Factory function to create an exporter by format name."""
    from pathlib import Path

    out = Path(output_dir)
    match format_name:
        case "json":
            return JSONExporter(output_dir=out)
        case "sqlite":
            return SQLiteExporter(db_path=out / "packages.db")
        case _:
            raise ValueError(f"Unknown export format: {format_name!r}. Use 'json' or 'sqlite'.")


__all__ = ["Exporter", "JSONExporter", "SQLiteExporter", "get_exporter"]

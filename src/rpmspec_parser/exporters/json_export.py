"""
JSON Exporter — Exports each package summary as a JSON file.
"""

import json
import logging
from pathlib import Path

import aiofiles

from rpmspec_parser.models.package import SpecPackage

logger = logging.getLogger(__name__)


class JSONExporter:
    """
    Exports SpecPackage objects as individual `<name>.json` files.

    Output structure:
        output_dir/
        ├── widgets.json
        └── widgets-doc.json
    """

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.count = 0

    async def export(self, package: SpecPackage) -> None:
        """Export a single package as a JSON file."""
        filepath = self.output_dir / f"{package.name}.json"

        async with aiofiles.open(filepath, "w") as f:
            await f.write(json.dumps(package.to_dict(), indent=2))

        self.count += 1
        logger.debug(f"[JSON] Exported {package.name}")

    async def finalize(self) -> None:
        """Log export summary."""
        logger.info(f"[JSON] Export complete: {self.count} packages exported to {self.output_dir}")

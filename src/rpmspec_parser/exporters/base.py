"""
Exporter Protocol — Base interface for all export backends.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rpmspec_parser.models.package import SpecPackage


@runtime_checkable
class Exporter(Protocol):
    """
    Protocol that all exporters must implement.

    Exporters receive SpecPackage summaries of a parsed spec file and
    persist them in their respective format (JSON files, SQLite, ...).
    """

    async def export(self, package: SpecPackage) -> None:
        """Export a single package summary."""
        ...

    async def finalize(self) -> None:
        """Called after all packages have been exported. Use for cleanup."""
        ...

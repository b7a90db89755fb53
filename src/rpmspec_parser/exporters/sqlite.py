"""
SQLite Exporter — Exports package summaries to a SQLite database.
"""

import json
import logging
import sqlite3
from pathlib import Path

from rpmspec_parser.models.package import SpecPackage

logger = logging.getLogger(__name__)


CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS packages (
    name TEXT PRIMARY KEY,
    version TEXT,
    release TEXT,
    summary TEXT,
    license TEXT,
    url TEXT,
    is_main INTEGER NOT NULL,
    spec_path TEXT,
    tags TEXT,
    sections TEXT
)
"""

INSERT_SQL = """
INSERT OR REPLACE INTO packages
(name, version, release, summary, license, url, is_main, spec_path, tags, sections)
VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
"""


class SQLiteExporter:
    """
    Exports SpecPackage objects to a SQLite database.

    Creates a 'packages' table keyed by package name.
    Tags and section lists are stored as JSON strings.
    """

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(str(db_path))
        self.conn.execute(CREATE_TABLE_SQL)
        self.conn.commit()
        self.count = 0

    async def export(self, package: SpecPackage) -> None:
        """Export a single package to the SQLite database."""
        self.conn.execute(
            INSERT_SQL,
            (
                package.name,
                package.version,
                package.release,
                package.summary,
                package.license,
                package.url,
                int(package.is_main),
                package.spec_path,
                json.dumps(package.tags),
                json.dumps(package.sections),
            ),
        )
        self.count += 1

    async def finalize(self) -> None:
        """Commit changes and close the connection."""
        self.conn.commit()
        self.conn.close()
        logger.info(f"[SQLite] Export complete: {self.count} packages exported to {self.db_path}")

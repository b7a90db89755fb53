"""
Spec Package Model — per-package summary of a parsed spec file.

Flattens the tag and section tables of one package into a record that
exporters can persist and downstream tools can consume.
"""

from dataclasses import asdict, dataclass, field


@dataclass
class SpecPackage:
    """
    Summary of one (sub)package declared in a spec file.

    `tags` holds every `Key: value` tag recorded for the package;
    `sections` lists the section tokens present, e.g. ["%package", "%files"].
    """

    name: str
    version: str | None = None
    release: str | None = None
    summary: str | None = None
    license: str | None = None
    url: str | None = None
    is_main: bool = False
    spec_path: str | None = None
    tags: dict[str, str] = field(default_factory=dict)
    sections: list[str] = field(default_factory=list)

    @property
    def nvr(self) -> str:
        """Name-version-release string, skipping unknown parts."""
        return "-".join(part for part in (self.name, self.version, self.release) if part)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SpecPackage":
        """Deserialize from dictionary."""
        return cls(
            name=data["name"],
            version=data.get("version"),
            release=data.get("release"),
            summary=data.get("summary"),
            license=data.get("license"),
            url=data.get("url"),
            is_main=data.get("is_main", False),
            spec_path=data.get("spec_path"),
            tags=data.get("tags", {}),
            sections=data.get("sections", []),
        )

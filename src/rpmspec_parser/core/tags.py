"""Tag Store — per-package `Key: value` metadata."""


class TagStore:
    """Mapping of package name to {tag: value}. Last write wins."""

    def __init__(self):
        self._tags: dict[str, dict[str, str]] = {}

    def set(self, package: str, tag: str, value: str) -> str:
        self._tags.setdefault(package, {})[tag] = value
        return value

    def get(self, package: str, tag: str) -> str | None:
        return self._tags.get(package, {}).get(tag)

    def for_package(self, package: str) -> dict[str, str]:
        """Copy of all tags recorded for a package (empty if unknown)."""
        return dict(self._tags.get(package, {}))

    def packages(self) -> list[str]:
        return list(self._tags)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {package: dict(tags) for package, tags in self._tags.items()}

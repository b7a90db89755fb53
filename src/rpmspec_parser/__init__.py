"""
RPM Spec Parser - splits RPM spec files into per-package sections.

Parses a spec file into a section table, a macro table and a per-package
tag table.
"""

__version__ = "1.0.0"


def __getattr__(name: str):
    """Lazy import of the public API."""
    if name == "RpmSpecParser":
        from rpmspec_parser.core.parser import RpmSpecParser

        return RpmSpecParser
    if name == "SpecPackage":
        from rpmspec_parser.models.package import SpecPackage

        return SpecPackage
    if name in ("SpecError", "SpecNotFoundError", "InvalidSpecError"):
        from rpmspec_parser.core import errors

        return getattr(errors, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "RpmSpecParser",
    "SpecPackage",
    "SpecError",
    "SpecNotFoundError",
    "InvalidSpecError",
    "__version__",
]

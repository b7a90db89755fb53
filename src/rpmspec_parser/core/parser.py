"""
RPM Spec Parser — splits a spec file into per-package sections.

Scans the spec line by line. Every recognized section header (%package,
%files, %build, ...) closes the section being accumulated, stores it in
the section table under its owning package and section token, and opens
a new one. The main package preamble is an implicit %package section.

Each parser instance owns its own macro, tag and section tables, so
several specs can be parsed side by side with independent instances.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from rpmspec_parser.core.errors import InvalidSpecError, SpecError, SpecNotFoundError
from rpmspec_parser.core.macros import MacroStore
from rpmspec_parser.core.naming import resolve_package_name
from rpmspec_parser.core.tags import TagStore
from rpmspec_parser.models.package import SpecPackage
from rpmspec_parser.models.section import (
    MAIN_PACKAGE,
    ParsedArgs,
    SectionKind,
    classify,
)
from rpmspec_parser.parsers.arguments import parse_section_args
from rpmspec_parser.parsers.content import (
    parse_normal_section_content,
    parse_package_section_content,
)
from rpmspec_parser.parsers.header import get_section_and_args

logger = logging.getLogger(__name__)


class RpmSpecParser:
    """
    Parser for a single RPM spec file.

    Usage:
        parser = RpmSpecParser("widgets.spec")
        parser.read_sections()
        parser.sections["widgets"]["%files"]
        parser.get_tag_value(None, "Version")
    """

    def __init__(self, spec_file: str | Path | None = None):
        self.path = str(spec_file) if spec_file is not None else None
        if spec_file is not None and not Path(spec_file).is_file():
            raise SpecNotFoundError("No such file", path=self.path)

        self.macros = MacroStore()
        self.tags = TagStore()
        self.sections: dict[str, dict[str, str]] = {}
        self._section_args: dict[tuple[str, str], ParsedArgs] = {}

    @classmethod
    def from_file(cls, spec_file: str | Path) -> "RpmSpecParser":
        """Create a parser for a file and parse it."""
        parser = cls(spec_file)
        parser.read_sections()
        return parser

    @classmethod
    def from_string(cls, text: str, path: str | None = None) -> "RpmSpecParser":
        """Parse spec text that is already in memory."""
        parser = cls()
        parser.path = path
        parser.parse_lines(text.splitlines())
        return parser

    # ──────────────────────────────────────────────
    # Section Splitting
    # ──────────────────────────────────────────────

    def read_sections(self) -> dict[str, dict[str, str]]:
        """Read the spec file and split it into sections."""
        if self.path is None:
            raise SpecError("No spec file given")

        try:
            with open(self.path, encoding="utf-8") as f:
                return self.parse_lines(f)
        except FileNotFoundError as e:
            raise SpecNotFoundError("No such file", path=self.path) from e
        except OSError as e:
            raise SpecError(f"Failed to read spec file: {e}", path=self.path) from e
        except UnicodeDecodeError as e:
            raise SpecError(f"Failed to decode spec file: {e}", path=self.path) from e

    def parse_lines(self, lines: Iterable[str]) -> dict[str, dict[str, str]]:
        """
        Split spec lines into sections and parse each one.

        Blank lines and `#` comments are skipped. Lines starting with a
        `%`-token that is not a section (%if, %setup, %dir, ...) are kept
        as content of the current section.

        Returns:
            The section table: {package: {section token: raw text}}.
        """
        self.macros = MacroStore()
        self.tags = TagStore()
        self.sections = {}
        self._section_args = {}

        section = [SectionKind.PACKAGE.value]
        for raw_line in lines:
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            token, _ = get_section_and_args(line)
            if classify(token).is_section:
                self._flush_section(section)
                section = [line]
            else:
                section.append(raw_line.rstrip())

        self._flush_section(section)

        logger.info(
            f"[SPEC] Parsed {self.path or '<string>'}: "
            f"{len(self.sections)} packages, "
            f"{sum(len(s) for s in self.sections.values())} sections"
        )
        return self.sections

    def _flush_section(self, lines: list[str]) -> None:
        """Store a finished section under its package and parse its content."""
        header = lines[0]
        token, raw_args = get_section_and_args(header)
        classification = classify(token)
        if not classification.is_section:
            raise InvalidSpecError("Not a section header", path=self.path, header=header)

        kind = classification.kind
        parsed_args = parse_section_args(kind, raw_args, self.macros)
        body = lines[1:]

        if kind is SectionKind.PACKAGE:
            package = parse_package_section_content(
                body,
                parsed_args,
                self.macros,
                self.tags,
                lambda args: self._resolve(args, header),
            )
        else:
            package = self._resolve(parsed_args, header)
            parse_normal_section_content(package, kind, body)

        self.sections.setdefault(package, {})[kind.value] = "\n".join(lines)
        self._section_args[(package, kind.value)] = parsed_args

    def _resolve(self, parsed_args: ParsedArgs, header: str | None = None) -> str:
        return resolve_package_name(parsed_args, self.macros, header=header, path=self.path)

    # ──────────────────────────────────────────────
    # Package Names
    # ──────────────────────────────────────────────

    @property
    def main_package_name(self) -> str:
        """The main package's `Name`, or 'main' before it is known."""
        return self.macros.get("name") or MAIN_PACKAGE

    def parse_section_args(self, section: SectionKind | str, arg_list: list[str] | str | None) -> ParsedArgs:
        """Parse section header arguments against this parser's macros."""
        return parse_section_args(section, arg_list, self.macros)

    def get_package_name(self, line_or_parsed_args: str | ParsedArgs) -> str:
        """
        Resolve the package a section belongs to.

        Args:
            line_or_parsed_args: A section header line such as '%files doc',
                or arguments already parsed from one.

        Raises:
            InvalidSpecError: The line is not a section header, or a prefixed
                subpackage is resolved before the main package name is known.
        """
        header = None
        if isinstance(line_or_parsed_args, str):
            header = line_or_parsed_args
            token, raw_args = get_section_and_args(header)
            if token is None:
                raise InvalidSpecError("Not a section header", path=self.path, header=header)
            line_or_parsed_args = self.parse_section_args(token, raw_args)

        return self._resolve(line_or_parsed_args, header)

    # ──────────────────────────────────────────────
    # Tags & Macros
    # ──────────────────────────────────────────────

    def get_tag_value(self, package: str | None, tag: str) -> str | None:
        """
        Get a tag value, or None if unset.

        An empty or None package means the main package.
        """
        if not package:
            package = self.main_package_name
        return self.tags.get(package, tag)

    def set_tag_value(self, package: str, tag: str, value: str) -> str:
        return self.tags.set(package, tag, value)

    def get_macro_value(self, macro: str) -> str | None:
        """Get a macro value, or None if undefined. %{S:1} reads SOURCE1."""
        return self.macros.get(macro)

    def set_macro_value(self, macro: str, value: str) -> str:
        return self.macros.set(macro, value)

    def expand_macros(self, text: str) -> str:
        """Expand `%{name}` placeholders that have a defined value."""
        return self.macros.expand(text)

    # ──────────────────────────────────────────────
    # Section Access
    # ──────────────────────────────────────────────

    def get_section(self, package: str | None, section: SectionKind | str) -> str | None:
        """Raw text of a section (header line included), or None."""
        token = section.value if isinstance(section, SectionKind) else section
        return self.sections.get(package or self.main_package_name, {}).get(token)

    def get_section_body(self, package: str | None, section: SectionKind | str) -> list[str] | None:
        """Lines of a section without its header line, or None."""
        text = self.get_section(package, section)
        if text is None:
            return None
        return text.split("\n")[1:]

    def get_section_args(self, package: str | None, section: SectionKind | str) -> ParsedArgs | None:
        """Arguments parsed from a section's header line, or None."""
        token = section.value if isinstance(section, SectionKind) else section
        return self._section_args.get((package or self.main_package_name, token))

    # ──────────────────────────────────────────────
    # Summaries
    # ──────────────────────────────────────────────

    def packages(self) -> list[SpecPackage]:
        """One summary per package found in the section table, main package first."""
        main_name = self.main_package_name
        names = sorted(self.sections, key=lambda name: name != main_name)

        result = []
        for name in names:
            tags = self.tags.for_package(name)
            is_main = name == main_name
            result.append(
                SpecPackage(
                    name=name,
                    version=tags.get("Version") or self.macros.get("version"),
                    release=tags.get("Release") or self.macros.get("release"),
                    summary=tags.get("Summary"),
                    license=tags.get("License") or self.get_tag_value(None, "License"),
                    url=tags.get("URL") or tags.get("Url"),
                    is_main=is_main,
                    spec_path=self.path,
                    tags=tags,
                    sections=list(self.sections[name]),
                )
            )
        return result

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "main_package": self.main_package_name,
            "sections": {package: dict(sections) for package, sections in self.sections.items()},
            "section_args": {
                f"{package} {token}": args.to_dict()
                for (package, token), args in self._section_args.items()
            },
            "tags": self.tags.to_dict(),
            "macros": self.macros.to_dict(),
        }

"""
Section content parsers.

The declaration parser extracts `Key: value` tag lines from a %package
section (the implicit preamble of the main package included) and feeds
the macro and tag stores. Every other section is kept verbatim.
"""

import logging
import re
from collections.abc import Callable, Iterable

from rpmspec_parser.core.macros import MacroStore
from rpmspec_parser.core.tags import TagStore
from rpmspec_parser.models.section import ParsedArgs, SectionKind

logger = logging.getLogger(__name__)

TAG_LINE_RE = re.compile(r"^(\w+)\s*:\s*(\S.*)$")

# Main-package tags that also define a lower-cased macro
MACRO_TAGS = ("Name", "Version", "Release")

# Source0:, Source:, Patch12: ...
_INDEXED_TAG_RE = re.compile(r"^(Source|Patch)(\d*)$")


def extract_tags(lines: Iterable[str]) -> list[tuple[str, str]]:
    """
    Collect (tag, value) pairs from body lines.

    Lines that are not tag lines are skipped. Values are returned as
    written, without macro expansion.
    """
    found = []
    for line in lines:
        match = TAG_LINE_RE.match(line.strip())
        if match:
            found.append((match.group(1), match.group(2)))
    return found


def apply_main_package_macros(found: list[tuple[str, str]], macros: MacroStore) -> None:
    """Write the macros that main-package tags define."""
    for tag, value in found:
        if tag in MACRO_TAGS:
            macros.set(tag.lower(), value)
            if tag == "Version":
                macros.set("ver", value)
            continue

        match = _INDEXED_TAG_RE.match(tag)
        if match:
            macros.set(f"{match.group(1).upper()}{match.group(2) or 0}", value)


def parse_package_section_content(
    body: Iterable[str],
    parsed_args: ParsedArgs,
    macros: MacroStore,
    tags: TagStore,
    resolve: Callable[[ParsedArgs], str],
) -> str:
    """
    Parse the body of a package declaration section.

    For the main package (no positional argument) the macros are written
    before the package name is resolved, so its tags are keyed by its own
    `Name`. Tags are stored under the resolved package name.

    `%package -n` without an argument also counts as the main package, so a
    `Name` tag in its body replaces the `name` macro used by later
    subpackages.

    Returns:
        The resolved package name.
    """
    found = extract_tags(body)

    if not parsed_args.args:
        apply_main_package_macros(found, macros)

    package = resolve(parsed_args)
    for tag, value in found:
        tags.set(package, tag, value)

    logger.debug(f"[SPEC] %package {package}: {len(found)} tags")
    return package


def parse_normal_section_content(package: str, kind: SectionKind, body: Iterable[str]) -> None:
    """Generic sections carry no structure beyond their raw text."""
    logger.debug(f"[SPEC] {kind.value} {package}: {sum(1 for _ in body)} lines")

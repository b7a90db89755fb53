"""
Section argument parser.

Interprets the arguments of a section header against the small flag
grammar RPM uses for section lines:

    -n          do not prefix the subpackage name with the main package name
    -f FILE     read the file list from FILE (%files only, repeatable)
    -p PROGRAM  scriptlet interpreter (%pre, %post, %preun, %postun)

Flags that do not apply to the section are consumed and dropped, and
unknown flags are ignored, so descriptors using newer flags still parse.
"""

import logging

from rpmspec_parser.core.macros import MacroStore
from rpmspec_parser.models.section import (
    FLAG_MARKER,
    SCRIPTLET_SECTIONS,
    ParsedArgs,
    SectionKind,
)

logger = logging.getLogger(__name__)

NO_PREFIX_SECTIONS = frozenset(
    {
        SectionKind.PACKAGE,
        SectionKind.DESCRIPTION,
        SectionKind.FILES,
        SectionKind.CHANGELOG,
    }
    | SCRIPTLET_SECTIONS
)
FILE_LIST_SECTIONS = frozenset({SectionKind.FILES})
INTERPRETER_SECTIONS = SCRIPTLET_SECTIONS

VALUE_FLAGS = ("-f", "-p")


def _split(arg_list: list[str] | str | None) -> list[str]:
    if arg_list is None:
        return []
    if isinstance(arg_list, str):
        return arg_list.split()
    return list(arg_list)


def parse_section_args(
    section: SectionKind | str | None,
    arg_list: list[str] | str | None,
    macros: MacroStore,
) -> ParsedArgs:
    """
    Parse the arguments of a section header.

    Args:
        section: Section kind, or its `%`-token.
        arg_list: Tokens after the section token (a raw string is split on whitespace).
        macros: Store used to expand `%{...}` placeholders in values.

    Returns:
        ParsedArgs with macro-expanded positionals and the recognized options.
    """
    kind = section if isinstance(section, SectionKind) else SectionKind.from_token(section or "")
    tokens = _split(arg_list)
    parsed = ParsedArgs()

    i = 0
    while i < len(tokens):
        token = tokens[i]
        i += 1

        if not token.startswith(FLAG_MARKER):
            parsed.args.append(macros.expand(token))
            continue

        flag, value = token, None
        if token[:2] in VALUE_FLAGS:
            flag = token[:2]
            if len(token) > 2:
                value = token[2:]
            elif i < len(tokens) and not tokens[i].startswith(FLAG_MARKER):
                value = tokens[i]
                i += 1

        if flag == "-n":
            if kind in NO_PREFIX_SECTIONS:
                parsed.opts["-n"] = True
            else:
                logger.debug(f"[ARGS] Dropped -n on {_token_name(kind, section)}")
        elif flag == "-f":
            if kind in FILE_LIST_SECTIONS and value is not None:
                parsed.opts.setdefault("-f", []).append(macros.expand(value))
            else:
                logger.debug(f"[ARGS] Dropped -f on {_token_name(kind, section)}")
        elif flag == "-p":
            if kind in INTERPRETER_SECTIONS and value is not None:
                parsed.opts["-p"] = macros.expand(value)
            else:
                logger.debug(f"[ARGS] Dropped -p on {_token_name(kind, section)}")
        else:
            logger.debug(f"[ARGS] Ignored unknown flag {token!r}")

    return parsed


def _token_name(kind: SectionKind | None, section) -> str:
    return kind.value if kind is not None else str(section)

"""
Section Model — the fixed vocabulary of an RPM spec file.

Defines the closed set of section kinds, the classification of
`%`-prefixed tokens, and the per-header parsed argument record.
"""

from dataclasses import dataclass, field
from enum import Enum, auto


MAIN_PACKAGE = "main"
SECTION_MARKER = "%"
FLAG_MARKER = "-"


class SectionKind(Enum):
    """Section types that open a new block in a spec file."""

    PACKAGE = "%package"
    DESCRIPTION = "%description"
    FILES = "%files"
    BUILD = "%build"
    INSTALL = "%install"
    PREP = "%prep"
    CHANGELOG = "%changelog"
    CLEAN = "%clean"
    CHECK = "%check"
    PRE = "%pre"
    POST = "%post"
    PREUN = "%preun"
    POSTUN = "%postun"
    VERIFYSCRIPT = "%verifyscript"

    @classmethod
    def from_token(cls, token: str) -> "SectionKind | None":
        """Exact-match lookup; returns None for anything that is not a section."""
        try:
            return cls(token)
        except ValueError:
            return None


# %if, %ifarch, %ifos, %else, %elif, %endif ...
CONDITIONAL_PREFIXES = ("%if", "%else", "%endif", "%elif")

SCRIPTLET_SECTIONS = frozenset(
    {SectionKind.PRE, SectionKind.POST, SectionKind.PREUN, SectionKind.POSTUN}
)


class MacroType(Enum):
    """How the section splitter treats a `%`-prefixed token."""

    IGNORABLE = auto()  # conditionals, kept as ordinary content lines
    SECTION = auto()
    ORDINARY = auto()


@dataclass(frozen=True)
class Classification:
    """Result of classifying a token: its type and, for sections, the kind."""

    type: MacroType
    kind: SectionKind | None = None

    @property
    def is_section(self) -> bool:
        return self.type is MacroType.SECTION


def classify(token: str | None) -> Classification:
    """
    Classify a `%`-prefixed token.

    Conditionals are checked first (prefix match), then the section set
    (exact match). Everything else is ordinary content.
    """
    if not token:
        return Classification(MacroType.ORDINARY)
    if token.startswith(CONDITIONAL_PREFIXES):
        return Classification(MacroType.IGNORABLE)
    kind = SectionKind.from_token(token)
    if kind is not None:
        return Classification(MacroType.SECTION, kind)
    return Classification(MacroType.ORDINARY)


@dataclass
class ParsedArgs:
    """
    Arguments parsed from a section header line.

    `args` holds positional arguments in order, macro-expanded.
    `opts` holds only recognized flags: "-n" (bool), "-f" (list of str)
    and "-p" (str).
    """

    args: list[str] = field(default_factory=list)
    opts: dict = field(default_factory=dict)

    @property
    def no_primary_prefix(self) -> bool:
        return self.opts.get("-n") is True

    @property
    def file_lists(self) -> list[str]:
        return list(self.opts.get("-f", []))

    @property
    def interpreter(self) -> str | None:
        return self.opts.get("-p")

    def to_dict(self) -> dict:
        return {"args": list(self.args), "opts": dict(self.opts)}

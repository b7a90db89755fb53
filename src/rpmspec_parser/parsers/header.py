"""
Section header parsing.

Splits a line such as '%package -n foo-devel' into the leading
`%`-token and the remaining raw argument string.
"""

import re

from rpmspec_parser.models.section import SECTION_MARKER

_HEADER_RE = re.compile(r"^(%\w+)\s*(.*)$")


def get_section_and_args(line: str) -> tuple[str | None, str | None]:
    """
    Split a header line into (token, raw_args).

    Returns (None, None) when the line does not start with the section
    marker. `raw_args` is None when nothing follows the token.

    '%files -f %{name}.lang' -> ('%files', '-f %{name}.lang')
    '%build'                 -> ('%build', None)
    """
    if not line.startswith(SECTION_MARKER):
        return None, None

    match = _HEADER_RE.match(line.strip())
    if not match:
        return None, None

    args = match.group(2).strip()
    return match.group(1), args or None

"""
Macro Store — named substitution values and `%{name}` expansion.

Only the single-pass substitution used by section headers is implemented.
Conditionals, nested macro calls and built-in macro functions are not.
"""

import logging
import re

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"%\{[\w\-:]+\}")

_SOURCE_REF_RE = re.compile(r"^S:(\d+)$")
_PATCH_REF_RE = re.compile(r"^P:(\d+)$")


def normalize_macro_name(name: str) -> str:
    """
    Rewrite indexed source/patch references.

    'S:1' -> 'SOURCE1'
    'P:12' -> 'PATCH12'
    """
    match = _SOURCE_REF_RE.match(name)
    if match:
        return f"SOURCE{match.group(1)}"
    match = _PATCH_REF_RE.match(name)
    if match:
        return f"PATCH{match.group(1)}"
    return name


class MacroStore:
    """Mapping of macro name to value, owned by a single parser instance."""

    def __init__(self):
        self._macros: dict[str, str] = {}

    def set(self, name: str, value: str) -> str:
        """Store a value under the normalized name and return it."""
        key = normalize_macro_name(name)
        self._macros[key] = value
        logger.debug(f"[MACRO] {key} = {value!r}")
        return value

    def get(self, name: str) -> str | None:
        """Return the stored value, or None when the macro is not defined."""
        return self._macros.get(normalize_macro_name(name))

    def __contains__(self, name: str) -> bool:
        return normalize_macro_name(name) in self._macros

    def __len__(self) -> int:
        return len(self._macros)

    def expand(self, text: str) -> str:
        """
        Replace every `%{name}` placeholder that has a stored value.

        Unknown placeholders are left untouched. Expansion is single-pass:
        a substituted value containing a placeholder is not expanded again.
        """
        values = {}
        for placeholder in set(PLACEHOLDER_RE.findall(text)):
            value = self.get(placeholder[2:-1])
            if value is not None:
                values[placeholder] = str(value)

        if not values:
            return text

        return PLACEHOLDER_RE.sub(lambda m: values.get(m.group(0), m.group(0)), text)

    def to_dict(self) -> dict[str, str]:
        return dict(self._macros)

"""
Package-name resolution.

Maps a section header back to the package it belongs to:

    %files               -> <Name>            (main package)
    %files doc           -> <Name>-doc
    %files -n python3-x  -> python3-x
    %files -n            -> main
"""

from rpmspec_parser.core.errors import InvalidSpecError
from rpmspec_parser.core.macros import MacroStore
from rpmspec_parser.models.section import MAIN_PACKAGE, ParsedArgs


def resolve_package_name(
    parsed_args: ParsedArgs,
    macros: MacroStore,
    header: str | None = None,
    path: str | None = None,
) -> str:
    """
    Resolve the owning package of a section from its parsed arguments.

    The last positional argument names the subpackage. Without -n it is
    prefixed with the main package's `name` macro, which must already be
    set by the main package declaration.

    Raises:
        InvalidSpecError: A prefixed subpackage is resolved before the main
            package name is known.
    """
    arg = parsed_args.args[-1] if parsed_args.args else None

    if parsed_args.no_primary_prefix:
        return arg if arg is not None else MAIN_PACKAGE

    name = macros.get("name")
    if arg is None:
        return name or MAIN_PACKAGE

    if not name:
        raise InvalidSpecError(
            "Failed to get main package name: subpackage declared before the main "
            "package 'Name' tag",
            path=path,
            header=header,
        )
    return f"{name}-{arg}"

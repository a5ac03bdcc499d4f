"""Identifier humanization.

Turns camelCase, PascalCase, snake_case and kebab-case field names into
space separated, capitalised phrases while keeping acronyms intact:

    propertyNameSDK    -> Property Name SDK
    _Unusual-Case_SDK  -> Unusual Case SDK
"""

import re

_SEPARATOR_RUN = re.compile(r"[_-]+")


def is_upper(char: str) -> bool:
    """Return True if lower-casing the character changes it.

    Digits, spaces and the empty string count as lower case.
    """
    return char != char.lower()


def humanize_name(identifier: str) -> str:
    """Convert an identifier into a human-readable phrase.

    Args:
        identifier: Field name in any common casing convention.

    Returns:
        Space separated phrase with each word capitalised and runs of
        upper case letters preserved as acronyms.
    """
    if not identifier:
        return ""

    name = _SEPARATOR_RUN.sub(" ", identifier).strip()
    if not name:
        return ""

    parts = [name[0].upper()]
    length = len(name)
    n = 1
    while n < length:
        char = name[n]
        if not is_upper(char):
            if name[n - 1] == " ":
                # a second consecutive space is dropped
                if char != " ":
                    parts.append(char.upper())
            else:
                parts.append(char)
        else:
            if name[n - 1] != " ":
                parts.append(" ")
            parts.append(char)
            # acronym
            while n + 1 < length and is_upper(name[n + 1]):
                parts.append(name[n + 1])
                n += 1
        n += 1

    return "".join(parts)

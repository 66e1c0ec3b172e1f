"""Page and directory name validation.

Every basename in a content tree becomes part of a route path, and file
basenames also become identifiers in the generated module, so names are
restricted to ASCII letters and digits.
"""

from pagewright._errors import InvalidNameError

_ALLOWED = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789")


def is_valid_name(name: str) -> bool:
    """Return True if *name* is non-empty and only ASCII letters and digits.

    ``str.isalnum`` is not used: it accepts non-ASCII letters and digits.

    """
    return bool(name) and all(ch in _ALLOWED for ch in name)


def check_name(name: str) -> None:
    """Raise InvalidNameError unless *name* passes is_valid_name."""
    if not is_valid_name(name):
        raise InvalidNameError(name)

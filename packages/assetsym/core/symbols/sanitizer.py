"""Identifier sanitization for asset names.

Asset names are split into words on ``-``, ``_`` and ``/`` (the namespace
separator). Inside each word every character outside ``[A-Za-z0-9]`` is
removed, so ``"letter-a-eyes-wide 1"`` yields the words
``["letter", "a", "eyes", "wide1"]``.
"""

from __future__ import annotations

import re

DEFAULT_IMAGE_PREFIX = "ImageName"
DEFAULT_COLOR_PREFIX = "ColorName"

_WORD_BOUNDARY = re.compile(r"[-_/]+")
_DISALLOWED = re.compile(r"[^A-Za-z0-9]")


def split_words(source_name: str) -> list[str]:
    """Split an asset name into identifier-safe words.

    Example:
        >>> split_words("letter-a-eyes-wide 1")
        ['letter', 'a', 'eyes', 'wide1']
    """
    words = (_DISALLOWED.sub("", segment) for segment in _WORD_BOUNDARY.split(source_name))
    return [w for w in words if w]


def _capitalize(word: str) -> str:
    # Only the first character changes; "eyeWhites" stays "EyeWhites"
    return word[:1].upper() + word[1:]


def sanitize(source_name: str, prefix: str = DEFAULT_IMAGE_PREFIX) -> str:
    """Derive the prefixed PascalCase identifier for an asset name.

    Args:
        source_name: Raw catalog entry name
        prefix: Namespace prefix prepended to the identifier

    Returns:
        Identifier such as ``ImageNameLetterABox``

    Example:
        >>> sanitize("letter_a_box")
        'ImageNameLetterABox'
        >>> sanitize("letter-a-eyes-wide 1")
        'ImageNameLetterAEyesWide1'
    """
    return prefix + "".join(_capitalize(w) for w in split_words(source_name))


def sanitize_member(source_name: str) -> str:
    """Derive the unprefixed lowerCamelCase member name for an asset name.

    Used for member declarations (``static let letterABox``). Names that
    would start with a digit get a leading underscore.

    Example:
        >>> sanitize_member("letter-a-eyes-wide 1")
        'letterAEyesWide1'
        >>> sanitize_member("3d-cube")
        '_3dCube'
    """
    words = split_words(source_name)
    if not words:
        return "_"

    first = words[0][:1].lower() + words[0][1:]
    member = first + "".join(_capitalize(w) for w in words[1:])
    if member[0].isdigit():
        member = "_" + member
    return member

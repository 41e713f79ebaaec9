"""
Utility functions for name conversion.
"""

import re

# Words at camelCase boundaries; uppercase runs ("HTTPStatus") form one word
_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")

# Alphanumeric chunks, case inside a chunk is preserved
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots, spaces) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "FIRST_NAME" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"

    Args:
        text: The text to convert (snake_case, camelCase, UPPER_SNAKE_CASE, or space-separated)

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)


def to_upper_camel_case(text: str) -> str:
    """Uppercase the first letter of each chunk, keeping the rest of the chunk intact.

    Unlike snake_to_pascal_case this keeps acronyms ("HTTPStatus" stays
    "HTTPStatus", "pet_ID" becomes "PetID"), which is what type names derived
    from schema titles and definition keys need.
    """
    chunks = _IDENTIFIER_PATTERN.findall(text.replace('"', ""))
    return "".join(chunk[0].upper() + chunk[1:] for chunk in chunks)


def to_csharp_identifier(text: str) -> str:
    """Turn arbitrary text into a valid C# identifier in PascalCase.

    Returns an empty string when nothing usable is left.
    """
    identifier = to_upper_camel_case(text)
    if identifier and identifier[0].isdigit():
        identifier = "_" + identifier
    return identifier


_CSHARP_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}


def to_csharp_string_literal(text: str) -> str:
    """Quote text as a regular C# string literal.

    Examples:
        'a"b' -> '"a\\"b"'
        "c\\d" -> '"c\\\\d"'
    """
    return '"' + "".join(_CSHARP_ESCAPES.get(c, c) for c in str(text)) + '"'


def to_single_line(text: str) -> str:
    """Collapse line breaks (\\r\\n, \\r or \\n) into single spaces."""
    return re.sub(r"\r\n|\r|\n", " ", str(text))

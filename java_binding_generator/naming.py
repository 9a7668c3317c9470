"""
Name conversions between Rust and Java conventions
"""

import re


_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+|[0-9]+")


def split_words(name: str) -> list[str]:
    """Split an identifier into words on underscores, dashes and case changes"""
    return _WORD_PATTERN.findall(name)


def to_camel_case(name: str) -> str:
    """Convert a Rust snake_case name to Java camelCase (get_foo_bar -> getFooBar)"""
    words = split_words(name)
    if not words:
        return name
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def to_pascal_case(name: str) -> str:
    """Convert an identifier to PascalCase (my_entity -> MyEntity)

    Names that already start uppercase without separators are kept as
    written, so acronyms survive (HTTPClient stays HTTPClient).
    """
    if name[:1].isupper() and "_" not in name and "-" not in name:
        return name
    words = split_words(name)
    if not words:
        return name
    return "".join(word.capitalize() for word in words)

"""Capture tag classification."""

from ..analyzers.base import Category

# Checked in order; the first rule with a matching word wins.
TAG_RULES: list[tuple[Category, tuple[str, ...]]] = [
    (Category.SIGNATURE, ("function", "method")),
    (Category.CLASS_DEFINITION, ("class",)),
    (Category.TYPE_DEFINITION, ("interface", "type", "enum")),
    (Category.IMPORT, ("import",)),
    (Category.COMMENT, ("comment",)),
    (Category.PROPERTY, ("property",)),
]


def classify_tag(tag: str) -> Category:
    """Map a capture tag such as ``definition.method`` to its category.

    Only the tag is inspected, never the captured node. Tags matching no
    rule are ``Category.IRRELEVANT``.
    """
    for category, words in TAG_RULES:
        if any(word in tag for word in words):
            return category
    return Category.IRRELEVANT

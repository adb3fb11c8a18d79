"""Java grammar."""

from ...analyzers.base import Grammar


class JavaGrammar(Grammar):
    """Outline query for Java source files.

    Interfaces and enums are kept whole, so only members of class bodies
    are captured on their own.
    """

    extensions = (".java",)
    language = "java"

    query = """
(line_comment) @comment

(block_comment) @comment

(import_declaration) @definition.import

(class_declaration) @definition.class

(record_declaration) @definition.class

(interface_declaration) @definition.interface

(enum_declaration) @definition.enum

(class_body (method_declaration) @definition.method)

(class_body (constructor_declaration) @definition.method)

(class_body (field_declaration) @definition.property)
"""

"""Go grammar."""

from ...analyzers.base import Grammar


class GoGrammar(Grammar):
    """Outline query for Go source files."""

    extensions = (".go",)
    language = "go"

    query = """
(comment) @comment

(import_declaration) @definition.import

(type_declaration) @definition.type

(function_declaration) @definition.function

(method_declaration) @definition.method
"""

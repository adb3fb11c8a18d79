"""Python grammar."""

from ...analyzers.base import Grammar


class PythonGrammar(Grammar):
    """Outline query for Python source files.

    Docstrings are captured as comments so they survive next to the
    signature they document.
    """

    extensions = (".py", ".pyi")
    language = "python"

    query = """
(comment) @comment

(module . (string) @comment)

(class_definition
  body: (block . (string) @comment))

(function_definition
  body: (block . (string) @comment))

(import_statement) @definition.import

(import_from_statement) @definition.import

(class_definition) @definition.class

(function_definition) @definition.function
"""

"""JavaScript grammar."""

from ...analyzers.base import Grammar


class JavaScriptGrammar(Grammar):
    """Outline query for JavaScript files."""

    extensions = (".js", ".jsx", ".mjs", ".cjs")
    language = "javascript"

    query = """
(comment) @comment

(import_statement) @definition.import

(class_declaration) @definition.class

(function_declaration) @definition.function

(generator_function_declaration) @definition.function

(method_definition) @definition.method

(lexical_declaration
  (variable_declarator
    value: [(arrow_function) (function_expression)])) @definition.function

(field_definition) @definition.property
"""

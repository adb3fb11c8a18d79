"""TypeScript and TSX grammars."""

from ...analyzers.base import Grammar

TYPESCRIPT_QUERY = """
(comment) @comment

(import_statement) @definition.import

(interface_declaration) @definition.interface

(type_alias_declaration) @definition.type

(enum_declaration) @definition.enum

(class_declaration) @definition.class

(abstract_class_declaration) @definition.class

(function_declaration) @definition.function

(generator_function_declaration) @definition.function

(function_signature) @definition.function

(method_definition) @definition.method

(abstract_method_signature) @definition.method

(lexical_declaration
  (variable_declarator
    value: [(arrow_function) (function_expression)])) @definition.function

(public_field_definition) @definition.property
"""


class TypeScriptGrammar(Grammar):
    """Outline query for TypeScript files."""

    extensions = (".ts", ".mts", ".cts")
    language = "typescript"
    query = TYPESCRIPT_QUERY


class TSXGrammar(Grammar):
    """TypeScript with JSX. Same node types, separate tree-sitter grammar."""

    extensions = (".tsx",)
    language = "tsx"
    query = TYPESCRIPT_QUERY

"""Rust grammar."""

from ...analyzers.base import Grammar


class RustGrammar(Grammar):
    """Outline query for Rust source files.

    ``impl`` blocks are outlined like classes: the header line is kept and
    the functions inside are captured as methods. Traits are kept whole.
    """

    extensions = (".rs",)
    language = "rust"

    query = """
(line_comment) @comment

(block_comment) @comment

(use_declaration) @definition.import

(struct_item) @definition.type

(enum_item) @definition.enum

(union_item) @definition.type

(type_item) @definition.type

(trait_item) @definition.interface

(impl_item) @definition.class

(source_file (function_item) @definition.function)

(mod_item body: (declaration_list (function_item) @definition.function))

(impl_item body: (declaration_list (function_item) @definition.method))
"""

"""Tree-sitter grammar definitions and their outline capture queries."""

from .go import GoGrammar
from .java import JavaGrammar
from .javascript import JavaScriptGrammar
from .python import PythonGrammar
from .rust import RustGrammar
from .typescript import TSXGrammar, TypeScriptGrammar

__all__ = [
    "GoGrammar",
    "JavaGrammar",
    "JavaScriptGrammar",
    "PythonGrammar",
    "RustGrammar",
    "TSXGrammar",
    "TypeScriptGrammar",
]

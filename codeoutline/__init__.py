"""codeoutline - condense source files into comment and signature outlines."""

__version__ = "0.1.0"

"""Concrete converter implementations.

Each module is organized by the family of formats it handles:

- structured.py: JSON pretty-print and minify
- php.py: PHP serialize() decoder
- markup.py: XML re-indentation
- text_codecs.py: Base64 and percent-encoding

All converters are registered via the @register_converter decorator when
this package is imported.
"""

# Import all converter modules to trigger registration
from . import markup, php, structured, text_codecs  # noqa: F401

__all__ = ["markup", "php", "structured", "text_codecs"]

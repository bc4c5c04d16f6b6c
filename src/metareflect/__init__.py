"""
metareflect: A fluent query layer over Python reflection.

This library provides:
- Annotation types: typed, immutable metadata applied to classes and methods as decorators
- Fluent narrowing views over declared methods, declared classes and annotations
- Cardinality assertions raising precise errors before a value is extracted
- TracedException for enhanced exception formatting
"""

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
]

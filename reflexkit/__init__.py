"""Small utilities: ASCII character classes, enum bit operations, error code catalogues, string loading, named records, cartesian powers and declarative command lines."""

__version__ = "0.1.0"

__all__ = ["bitwise", "cartesian", "chars", "cli", "errors", "from_string", "named_tuple"]
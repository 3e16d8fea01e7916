"""Low-level utilities: 64-bit arithmetic, printf formatting, ustar headers, bitmaps, lists and hash tables."""

__version__ = "0.1.0"
__all__ = [
    "algorithms",
    "arithmetic",
    "bitmap",
    "ctype",
    "hashtable",
    "linkedlist",
    "printf",
    "rc4random",
    "rounding",
    "ustar",
]
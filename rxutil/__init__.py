"""Parameter transforms, link functions, stable sorting, string comparison and argument checks."""

__version__ = "0.1.0"

__all__ = [
    "checks",
    "evid",
    "links",
    "merging",
    "numeric",
    "strings",
    "timsort",
    "transforms",
]
from .tuples import clampf, clampf_n, clampf3, clampf4, equals, duplicate

__all__ = ["clampf", "clampf_n", "clampf3", "clampf4", "equals", "duplicate"]

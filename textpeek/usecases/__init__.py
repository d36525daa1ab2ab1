"""Use-case layer for orchestrating GUI workflows.

Each module coordinates domain objects and ports without performing I/O
directly, preserving MVVM + Hexagonal boundaries.
"""

"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (filesystem documents,
    JSON prefs storage, the Tk file dialog, and in-memory test doubles).

Call context:
    Imported by app composition modules (for runtime wiring) and by tests (for
    in-memory doubles and storage behavior verification).
"""

"""ViewModel package for UI state and command surfaces.

Call context:
    ``textpeek/app/main.py`` and the app controller import concrete
    viewmodels from this package to bind view callbacks to state transitions.

Responsibilities:
    - Expose UI state and command intent callbacks.
    - Keep MVVM boundaries explicit by avoiding persistence and file I/O.
"""

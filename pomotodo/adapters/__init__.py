"""Adapter package for external I/O implementations.

Purpose:
    Concrete implementations for domain ports; currently the JSON settings
    store used by the app bootstrap.

Call context:
    Imported by ``pomotodo/app/main.py`` for runtime wiring and by tests.
"""

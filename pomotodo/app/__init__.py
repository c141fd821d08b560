"""Application composition layer for the Tkinter GUI.

Modules in this package wire views, view models, the settings adapter, and
the Tk-backed tick scheduler into the runnable desktop app without placing
timer logic in views.
"""

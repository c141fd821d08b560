"""Pomotodo: a Tkinter to-do list with a Pomodoro countdown per task."""

__version__ = "0.1.0"

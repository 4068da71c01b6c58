"""Configuration file handling and dialog texts for a desktop countdown and pomodoro timer."""

__version__ = "0.1.0"
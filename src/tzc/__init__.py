"""tzc — convert UTC timestamps into named time zones."""

__version__ = "1.0.0"

"""Batch rename files and directories by editing their names in a text editor."""

__version__ = "1.0.0"
"""Kernel-library helpers: printf formatting, strings, command lines, bitmaps, lists, boot info and graphics."""

__version__ = "0.1.0"
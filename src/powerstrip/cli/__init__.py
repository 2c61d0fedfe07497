"""PowerStrip CLI module.

This module provides the command-line entry point that runs the interactive
power strip menu.
"""

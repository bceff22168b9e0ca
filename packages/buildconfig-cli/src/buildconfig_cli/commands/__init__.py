"""CLI commands for buildconfig.

Each command is defined in its own module for lazy loading.
"""

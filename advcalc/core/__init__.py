"""
Core numeric routines, domain models, contracts and errors.

This package is independent of the console surface (CLI, demo output).
"""

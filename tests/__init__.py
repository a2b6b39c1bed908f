"""
Test suite for advcalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""

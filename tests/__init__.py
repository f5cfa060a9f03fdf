"""
Test suite for ordinal-cnf

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for cointoss

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for fo_numeric

Contains:
- tests/unit/          : Unit tests for individual modules
"""

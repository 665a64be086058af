"""
Test suite for screen-calc

Contains:
- tests/unit/          : Unit tests for individual modules
"""

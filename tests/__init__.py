"""
Test suite for decimals

Contains:
- tests/unit/          : Unit tests for individual modules
"""

"""
Test suite for badu-py

Contains:
- tests/unit/          : Unit tests for individual modules
"""

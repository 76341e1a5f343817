"""
Test suite for the exact numeric kernel

Contains:
- tests/unit/          : Unit tests for individual modules
"""

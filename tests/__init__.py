"""
Test suite for lagrange-reconstruct

Contains:
- tests/unit/          : Unit tests for individual modules
"""

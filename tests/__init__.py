"""
Test suite for chartjs-types

Contains:
- tests/unit/          : Unit tests for individual modules
"""

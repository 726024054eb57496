"""
Test suite for bounded-number-core

Contains:
- tests/unit/        : Unit tests for individual modules
- tests/properties/  : Property-based tests (Hypothesis) for the numeric core
"""

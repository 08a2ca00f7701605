"""
Test suite for complex-field-demo

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""

"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the Optional container.
Any compliant implementation MUST pass these tests.

The tests are organized by law:
1. test_state_laws.py - has_value(), value(), value_or() and equality laws
2. test_marker_laws.py - the absent marker and record equality

These tests use hypothesis for property-based testing.
"""

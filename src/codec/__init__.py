"""Identifier codec.

This package generates and parses time-sortable 26-character identifiers
derived from version-7 time-ordered 128-bit values.
"""

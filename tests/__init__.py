"""
Test suite for rangecheck

Contains:
- tests/unit/          : Unit tests for domain, contracts and CLI modules
"""

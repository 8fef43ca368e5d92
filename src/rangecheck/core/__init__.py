"""
Core domain models and contracts.

This module contains the building blocks that are independent of the
command-line front end.
"""

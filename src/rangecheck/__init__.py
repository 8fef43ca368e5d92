"""
rangecheck — closed integer ranges [lower, upper].

Contains:
- core/domain/     : ClosedRange value type and int32 parsing
- core/contracts/  : JSON Schema contracts for serialized ranges and CLI reports
- cli/             : command-line front end
"""

__version__ = "0.1.0"

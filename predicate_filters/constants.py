# predicate_filters/constants.py
"""
Predicate Filters Constants

This module defines constants used throughout the predicate_filters package:

ENUMERATION: bounds on exhaustive questions over a carrier
- MAX_ENUMERATION_ELEMENTS: largest carrier whose powerset may be enumerated

DISPLAY: repr formatting
- REPR_ELEMENT_LIMIT: elements shown before a set repr is truncated
"""


# =============================================================================
# ENUMERATION
# =============================================================================

# Subset tests and equality only need one pass over the carrier; law checks,
# tendsto and ultrafilter checks walk the powerset (2^n sets).
MAX_ENUMERATION_ELEMENTS = 16

assert 0 < MAX_ENUMERATION_ELEMENTS <= 24, "Powerset enumeration must stay tractable"


# =============================================================================
# DISPLAY
# =============================================================================

REPR_ELEMENT_LIMIT = 8
DEFAULT_DOMAIN_NAME = "X"

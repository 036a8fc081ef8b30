"""
Core domain models, mathematical primitives, and contracts.

This module contains the numeric value engine used by the property
pipeline; it is independent of the document tree and layout.
"""

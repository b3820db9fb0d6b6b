"""Candidate generator implementations.

This package contains concrete implementations of candidate generators.
"""

from shared.implementations.generators.string_generator import StringGenerator

__all__ = ["StringGenerator"]

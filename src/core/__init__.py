"""
Core value types, mathematical primitives, and invariants.

This module contains the arbitrary-precision integer engine and the
building blocks it is made of; nothing here depends on external systems.
"""

"""Typed search parameter validation.

The params layer checks raw query parameter values (scalars and `low,high` ranges) against the type
declared for each parameter, before they reach query construction.
"""

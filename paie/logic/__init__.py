"""Logic package for the payroll roster.

This file marks the directory as a Python package. It does not contain any
runtime logic but allows for explicit relative imports and tooling that
expects traditional packages with an ``__init__.py``.
"""

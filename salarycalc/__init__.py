"""Salary Calc - salary breakup from a gross amount and a compensation template."""

__version__ = "0.1.0"

"""Compound-interest calculator: lump-sum and taxed accumulation scenarios."""

__version__ = "0.1.0"

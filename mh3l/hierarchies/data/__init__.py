"""Coefficient tables of the hierarchy expansions, one module per hierarchy."""

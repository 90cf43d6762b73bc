"""A small column-oriented data frame with typed columns, CSV loading and demo commands."""

__version__ = "0.1.0"
"""jobmatch: deterministic candidate/job fit scoring."""

__version__ = "0.1.0"

"""Import, calculation and in-memory or SQL storage of well-test data."""

__version__ = "0.1.0"
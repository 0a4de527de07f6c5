"""Console system for managing students, courses and grades."""

__version__ = "3.0.0"
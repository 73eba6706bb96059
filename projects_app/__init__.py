"""Console tool for managing projects with their materials, steps and categories."""

__version__ = "1.0.0"

"""Community-area spatial assignment for the Chicago explorer."""

__version__ = "0.1.0"

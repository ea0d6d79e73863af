"""MediAssist - structured rendering of medical assistant replies."""

__version__ = "0.1.0"

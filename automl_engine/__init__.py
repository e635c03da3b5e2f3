"""Trainer extension catalog for automated model selection."""

__version__ = "0.1.0"

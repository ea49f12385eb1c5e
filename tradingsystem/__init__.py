"""Automatic stock trading over interchangeable broker drivers (Kiwer, Nemo and a mock)."""

__version__ = "0.1.0"
"""Skill Exchange - community skill sharing service."""

__version__ = "0.1.0"

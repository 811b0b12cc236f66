"""Hoops Digest - canonical game data from upstream sports payloads."""

__version__ = "0.1.0"

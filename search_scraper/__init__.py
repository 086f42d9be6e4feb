"""Headless browser search scraper."""

__version__ = "1.0.0"

"""Playwright module for the search scraper."""

from .browser import BrowserSession, build_launch_args
from .pages import configure_page
from .extract import EXTRACT_RESULTS_SCRIPT

__all__ = [
    "BrowserSession",
    "build_launch_args",
    "configure_page",
    "EXTRACT_RESULTS_SCRIPT",
]

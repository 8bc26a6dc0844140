"""
User interface package for the Matchday rotation manager.

This package contains the Flask web interface.
"""
from .web_app import create_app, run_web_app

__all__ = ["create_app", "run_web_app"]

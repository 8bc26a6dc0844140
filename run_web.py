#!/usr/bin/env python3
"""
Main entry point for the Matchday rotation manager web application.

This script launches the Flask-based web server with club data stored in a
JSON file next to the project (override with ``MATCHDAY_DATA_FILE``).
"""
import logging
import os

from matchday.services import JsonFileStorage
from matchday.ui.web_app import run_web_app
from matchday.utils.constants import DEFAULT_DATA_FILE, DEFAULT_HOST, DEFAULT_PORT, INITIAL_MEMBERS

if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("MATCHDAY_LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    project_root = os.path.dirname(os.path.abspath(__file__))
    data_file = os.environ.get("MATCHDAY_DATA_FILE", os.path.join(project_root, DEFAULT_DATA_FILE))
    run_web_app(
        host=os.environ.get("MATCHDAY_HOST", DEFAULT_HOST),
        port=int(os.environ.get("MATCHDAY_PORT", DEFAULT_PORT)),
        storage=JsonFileStorage(data_file),
        initial_members=INITIAL_MEMBERS,
    )

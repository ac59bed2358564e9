"""Persistence server (Flask) over a single JSON file."""

"""Persistence: HTTP client for the tasks endpoint and the background push loop."""

"""orange time: personal task tracker (dashboard, timeline, editor) with a JSON-file backend."""

__version__ = "0.1.0"

"""Command-line entrypoints, composition root and slash commands."""

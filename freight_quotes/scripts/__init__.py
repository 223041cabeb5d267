"""Command-line tools for the freight quote engine."""

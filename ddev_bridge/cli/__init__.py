"""Command-line interface for ddev-bridge."""

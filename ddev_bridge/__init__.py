"""Run Claude Code shell commands inside a DDEV container."""

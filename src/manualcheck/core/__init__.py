"""Core infrastructure shared by the CLI and library consumers."""

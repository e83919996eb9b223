"""Command-line interface for SEEKSTREAM."""

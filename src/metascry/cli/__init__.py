"""Command-line interface for metascry."""

"""Command line interface for grit."""

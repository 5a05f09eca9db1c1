"""Command-line interface for dict_dispatch."""

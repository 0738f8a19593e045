"""Command-line interface for grid-layout."""

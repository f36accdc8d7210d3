"""Command line interface for nodeinfluence."""

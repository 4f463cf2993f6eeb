"""Command line interface for Lambda Builder."""

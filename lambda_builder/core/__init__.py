"""Core build pipeline for Lambda Builder."""

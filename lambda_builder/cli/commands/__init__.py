"""Lambda Builder commands."""

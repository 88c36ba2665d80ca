"""Location application module."""

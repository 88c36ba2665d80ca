"""Location persistence adapters."""

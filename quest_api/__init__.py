"""Quest API backend package."""

"""Output package - terminal colors and markdown tables."""

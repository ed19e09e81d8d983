"""Application layer: rendering and reporting."""

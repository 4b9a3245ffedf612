"""Application-level API wiring."""

"""Per-entity controllers built on the CRUD factory."""

"""Application layer: services orchestrating domain entities and ports."""

"""Application layer: services orchestrating the core."""

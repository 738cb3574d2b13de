"""Application layer: backend registry, bibliography writer and use cases."""

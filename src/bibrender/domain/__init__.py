"""Domain layer: text model, backend contract and rendering."""

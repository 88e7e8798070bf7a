"""Infrastructure layer: interfaces to external collaborators (storage)."""

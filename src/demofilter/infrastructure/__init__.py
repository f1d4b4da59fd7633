"""Infrastructure layer: field resolution, reference loading, filters, adapters."""

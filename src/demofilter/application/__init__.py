"""Application layer: selection state, compilation, matching and call sites."""

"""Application layer: request-level orchestration over the core pipeline."""

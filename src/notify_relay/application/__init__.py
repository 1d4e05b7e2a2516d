"""Application layer – notification coalescing and delivery."""

"""Application layer: error model, mappers and queries."""

"""Base layer: protocol constants, signing engine, errors, logging, transport pool."""

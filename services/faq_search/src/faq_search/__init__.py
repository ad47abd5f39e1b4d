"""FAQ keyword search service."""

"""Per-resource Service Fabric operations."""

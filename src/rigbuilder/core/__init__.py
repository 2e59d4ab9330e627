"""Core layer: configuration, routes, domain and transport-free services."""

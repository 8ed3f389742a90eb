"""Adapters layer - config, HTTP, endpoint clients, pollers, storage and camera."""

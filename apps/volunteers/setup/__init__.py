"""Application setup (config, logging, dependency wiring)."""

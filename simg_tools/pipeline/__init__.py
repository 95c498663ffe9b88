"""Headless pipeline stages for the SIMG content tooling."""

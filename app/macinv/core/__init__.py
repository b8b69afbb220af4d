"""Core export pipeline, configuration and preflight checks."""

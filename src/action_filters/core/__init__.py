"""Core types, errors, configuration and interfaces."""

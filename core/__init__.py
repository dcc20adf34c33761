"""Core timing primitives."""

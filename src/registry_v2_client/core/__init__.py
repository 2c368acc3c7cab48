"""Core request machinery."""

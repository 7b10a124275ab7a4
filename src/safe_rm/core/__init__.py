"""Core normalization, filtering and execution functionality."""

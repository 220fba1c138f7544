"""Shared kernel: value types, configuration and errors."""

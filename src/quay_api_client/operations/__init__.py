"""Quay API operations implemented as plain coroutines."""

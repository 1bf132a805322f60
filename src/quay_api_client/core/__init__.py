"""Core building blocks shared by the client and the operations."""

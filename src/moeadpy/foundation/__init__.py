"""Problem-independent building blocks."""

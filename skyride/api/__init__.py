"""HTTP surface for the conversation host."""

"""Application layer orchestrating tagging use cases for user interfaces."""

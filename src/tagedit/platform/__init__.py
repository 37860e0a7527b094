"""Infrastructure adapters: logging and the external editor bridge."""

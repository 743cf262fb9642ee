"""Infrastructure layer — template loading and other host-facing concerns."""

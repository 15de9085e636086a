"""Infrastructure layer - logging and process-wide instance management."""

"""Domain layer - pattern interfaces (ports) and the domain exception hierarchy."""

"""Infrastructure layer — concrete hosts for the selection command engine."""

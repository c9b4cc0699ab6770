"""Infrastructure layer - logging, events and error handling."""

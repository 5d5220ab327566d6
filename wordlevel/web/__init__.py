"""Web — Flask API for interactive checking."""

"""Authentication gate, ownership rules and auth endpoints."""

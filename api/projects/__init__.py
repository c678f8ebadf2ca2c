"""Projects owned by a user."""

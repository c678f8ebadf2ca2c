"""Tickets within a project."""

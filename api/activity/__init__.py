"""Ticket activity log."""

"""Reminder bot services."""

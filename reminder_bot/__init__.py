"""Scheduled team reminders for Google Chat."""

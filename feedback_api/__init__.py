"""Contact/feedback form API."""

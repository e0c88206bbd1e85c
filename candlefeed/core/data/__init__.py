"""Data access: upstream providers and the response cache."""

"""Chirp Feed: paginated, viewer-aware post feeds and user discovery."""

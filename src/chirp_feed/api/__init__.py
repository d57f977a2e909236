"""HTTP API for the Chirp Feed service."""

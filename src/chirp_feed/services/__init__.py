"""Business logic services for the Chirp Feed application.

Modules are imported directly (``chirp_feed.services.feed`` and so on) so that
repositories can depend on the criteria and pagination helpers here.
"""

"""Botsify API access: the settings client and the dispatcher for resolved instructions."""

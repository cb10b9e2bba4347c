"""Version 1 of the Business Directory API."""

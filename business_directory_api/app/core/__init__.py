"""
Cross-cutting pieces: settings, SQLite access, logging, password
helpers, localization, error types and geospatial math.
"""

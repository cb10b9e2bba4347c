"""
Endpoint modules for API v1 (auth, businesses, categories, i18n).

The routers are aggregated in ``router.py`` at the package level.
"""

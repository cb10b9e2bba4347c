"""
Pydantic models for listings, users and the session.

The same models are used as service return values and as API response
bodies; ``UserRecord`` is the only one that carries a password and it is
never returned by an endpoint.
"""

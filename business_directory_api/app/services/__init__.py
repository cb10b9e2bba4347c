"""
Service layer.

``EntityStore`` owns the SQLite connection; ``DirectoryService`` and
``AuthService`` are built on top of a store instance and hold the
in-memory listing cache and the login session respectively.  Services
are constructed explicitly (see ``main.create_app``) so tests can give
each case its own database.
"""

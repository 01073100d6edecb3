"""Administrative back-office for user accounts.

The package is split into ``domain`` (entities and errors), ``infrastructure``
(database, email, tokens, rendering, seeders), ``application`` (use cases) and
``interfaces`` (FastAPI routes).
"""

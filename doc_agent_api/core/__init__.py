"""
Infrastructure shared by both services.

Configuration, logging setup, error handlers, request logging and the
thread‑safe in‑memory keyed store.  Nothing in this package holds
process‑wide mutable state; stores are constructed explicitly and handed
to the application factories.
"""

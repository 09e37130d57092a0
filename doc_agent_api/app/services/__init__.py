"""
Service layer for the catalog API.

Services own the data and expose plain Python operations; the endpoint
modules only translate between HTTP and these calls.
"""

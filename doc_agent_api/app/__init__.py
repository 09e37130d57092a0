"""
Catalog application package.

Users and products live in one ``CatalogStore`` created by the
application factory in ``main``.  Routes are grouped under
``api/<version>/`` the same way for every resource, and the service
layer in ``services`` owns all data access.
"""

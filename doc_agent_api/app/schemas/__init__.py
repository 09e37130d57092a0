"""
Pydantic schema definitions for the catalog API.

Each resource defines its stored record (a frozen model kept by the
store) and an input model used to decode request bodies.  Response
envelopes are declared explicitly so the wire contract is visible in
one place and in the generated OpenAPI document.
"""

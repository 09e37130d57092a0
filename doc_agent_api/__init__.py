"""
Top‑level package for the Doc Agent demo services.

Two independent HTTP services live here side by side:

* ``doc_agent_api.app`` – the catalog API (users and products);
* ``doc_agent_api.pokedex`` – a small personal Pokédex API.

They share nothing at runtime apart from the infrastructure helpers in
``doc_agent_api.core`` (settings, logging, the in‑memory keyed store).
"""

__all__ = []

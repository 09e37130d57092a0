"""
Personal Pokédex service.

A single resource, captured Pokémon, kept in a ``PokedexStore`` with
plain sequential ids (``"1"``, ``"2"``, ...).  It shares no state with the
catalog application.
"""

"""
Pydantic models for the Pokédex.

On the wire the shiny flag is called ``isShiny``; in Python it is
``is_shiny``.  Both names are accepted in request bodies.  Request
bodies are decoded strictly: ``"yes"`` is not a bool and ``"500"`` is
not an int.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

from doc_agent_api.core.store import Record


class Pokemon(Record):
    """A captured Pokémon.  No timestamps are kept for this resource."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    cp: int = 0
    is_shiny: bool = Field(False, alias="isShiny")


class PokemonIn(BaseModel):
    """Request body for creating or replacing a Pokémon."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field("", examples=["Pikachu"])
    cp: StrictInt = Field(0, examples=[500])
    is_shiny: StrictBool = Field(False, alias="isShiny")

    def to_record(self) -> Pokemon:
        return Pokemon(name=self.name, cp=self.cp, is_shiny=self.is_shiny)


class PokemonList(BaseModel):
    pokemon: List[Pokemon]
    count: int


class DeleteResult(BaseModel):
    result: str
    id: str

"""
HTTP handlers for ``/pokemon``.

The store is taken from ``app.state`` through ``get_store``; handlers
only translate between HTTP and store calls.  A missing id becomes a
404 and a body that does not decode into ``PokemonIn`` is answered with
400 before the store is touched.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from doc_agent_api.core.errors import ErrorResponse
from doc_agent_api.pokedex.models import DeleteResult, Pokemon, PokemonIn, PokemonList
from doc_agent_api.pokedex.store import PokedexStore

router = APIRouter(prefix="/pokemon", tags=["pokemon"])


def get_store(request: Request) -> PokedexStore:
    return request.app.state.pokedex


def _not_found(pokemon_id: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Pokemon not found: {pokemon_id}")


@router.get("", response_model=PokemonList)
def list_pokemon(store: PokedexStore = Depends(get_store)) -> PokemonList:
    """Return every captured Pokémon with the total count."""
    pokemon = store.list()
    return PokemonList(pokemon=pokemon, count=len(pokemon))


@router.post("", response_model=Pokemon, status_code=status.HTTP_201_CREATED, responses={400: {"model": ErrorResponse}})
def create_pokemon(pokemon_in: PokemonIn, store: PokedexStore = Depends(get_store)) -> Pokemon:
    """Catch a Pokémon.  Ids count up from 1 and are never reused."""
    return store.create(pokemon_in.to_record())


@router.get("/{pokemon_id}", response_model=Pokemon, responses={404: {"model": ErrorResponse}})
def get_pokemon(pokemon_id: str, store: PokedexStore = Depends(get_store)) -> Pokemon:
    """Retrieve a single Pokémon by id."""
    pokemon = store.get(pokemon_id)
    if pokemon is None:
        raise _not_found(pokemon_id)
    return pokemon


@router.put(
    "/{pokemon_id}",
    response_model=Pokemon,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_pokemon(pokemon_id: str, pokemon_in: PokemonIn, store: PokedexStore = Depends(get_store)) -> Pokemon:
    """Replace a Pokémon's fields; the id in the path wins over any id in the body."""
    pokemon = store.update(pokemon_id, pokemon_in.to_record())
    if pokemon is None:
        raise _not_found(pokemon_id)
    return pokemon


@router.delete("/{pokemon_id}", response_model=DeleteResult, responses={404: {"model": ErrorResponse}})
def delete_pokemon(pokemon_id: str, store: PokedexStore = Depends(get_store)) -> DeleteResult:
    """Release a Pokémon and echo its id."""
    if not store.delete(pokemon_id):
        raise _not_found(pokemon_id)
    return DeleteResult(result="success", id=pokemon_id)

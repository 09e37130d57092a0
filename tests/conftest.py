"""Shared fixtures: a fresh application and store for every test."""

from __future__ import annotations

import dataclasses

import pytest
from fastapi.testclient import TestClient

from doc_agent_api.app.main import create_app as create_catalog_app
from doc_agent_api.app.services.catalog_store import CatalogStore
from doc_agent_api.core.config import Settings
from doc_agent_api.pokedex.main import create_app as create_pokedex_app
from doc_agent_api.pokedex.store import PokedexStore


@pytest.fixture
def settings() -> Settings:
    return dataclasses.replace(Settings(), log_level="WARNING", log_file="", id_policy="sequential")


@pytest.fixture
def catalog() -> CatalogStore:
    return CatalogStore.with_sample_data()


@pytest.fixture
def catalog_client(settings: Settings, catalog: CatalogStore) -> TestClient:
    return TestClient(create_catalog_app(settings, catalog))


@pytest.fixture
def pokedex() -> PokedexStore:
    return PokedexStore()


@pytest.fixture
def pokedex_client(settings: Settings, pokedex: PokedexStore) -> TestClient:
    return TestClient(create_pokedex_app(settings, pokedex))

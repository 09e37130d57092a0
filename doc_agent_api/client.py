"""Client for the catalog and Pokédex APIs.

Thin wrappers around ``requests`` used by scripts and smoke checks that
talk to a running service.  Every call returns a tuple ``(data, error)``:
on success ``error`` is ``None``; on failure ``data`` is ``None`` (or an
empty list / ``False``) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  A 404 therefore shows up as an error
with ``status_code == 404`` rather than an exception, matching how the
services themselves treat a missing id.

Example::

    client = CatalogClient(base_url="http://localhost:8080")
    user, error = client.create_user({"name": "Carol", "email": "carol@example.com"})
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class _BaseClient:
    """Shared HTTP plumbing for the service clients."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Root URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("error", "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.warning("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, key: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        if isinstance(data, dict) and isinstance(data.get(key), list):
            return data[key], None
        return [], {"status_code": None, "message": f"unexpected list response from {path}"}

    def _delete(self, path: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", path)
        if error:
            return False, error
        return True, None


class CatalogClient(_BaseClient):
    """Client for the users and products of the catalog API."""

    def __init__(self, *, base_url: str, prefix: str = "/api/v1", **kwargs: Any) -> None:
        super().__init__(base_url=base_url, **kwargs)
        self.prefix = prefix.rstrip("/")

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{self.prefix}/health")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"{self.prefix}/users", "users")

    def get_user(self, user_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{self.prefix}/users/{user_id}")

    def get_user_profile(self, user_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{self.prefix}/users/{user_id}/profile")

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"{self.prefix}/users", json_body=payload)

    def update_user(self, user_id: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"{self.prefix}/users/{user_id}", json_body=payload)

    def delete_user(self, user_id: str) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"{self.prefix}/users/{user_id}")

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------
    def list_products(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"{self.prefix}/products", "products")

    def get_product(self, product_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{self.prefix}/products/{product_id}")

    def create_product(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"{self.prefix}/products", json_body=payload)

    def update_product(
        self, product_id: str, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"{self.prefix}/products/{product_id}", json_body=payload)

    def delete_product(self, product_id: str) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"{self.prefix}/products/{product_id}")


class PokedexClient(_BaseClient):
    """Client for the Pokédex API."""

    def list_pokemon(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/pokemon", "pokemon")

    def get_pokemon(self, pokemon_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/pokemon/{pokemon_id}")

    def create_pokemon(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/pokemon", json_body=payload)

    def update_pokemon(
        self, pokemon_id: str, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/pokemon/{pokemon_id}", json_body=payload)

    def release_pokemon(self, pokemon_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a Pokémon from the Pokédex."""
        return self._delete(f"/pokemon/{pokemon_id}")

"""
In‑memory catalog of users and products.

``CatalogStore`` bundles two keyed collections behind one shared
readers‑writer lock, so a write to either collection serializes with
every other catalog operation.  An instance is created by the
application factory and attached to ``app.state``; endpoints reach it
through the ``get_catalog`` dependency.

Ids are minted by the configured policy: ``usr_<n>`` for users and
``prd_<n>`` for products.  The fixed sample records use zero‑padded ids
(``usr_001``) and therefore never clash with sequential ids.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from doc_agent_api.app.schemas.product import Product
from doc_agent_api.app.schemas.user import User
from doc_agent_api.core.store import KeyedStore, ReadWriteLock, make_id_policy, utcnow


USER_ID_PREFIX = "usr"
PRODUCT_ID_PREFIX = "prd"


class CatalogStore:
    """Users and products kept in memory for the lifetime of the process."""

    def __init__(self, id_policy: str = "sequential", lock: Optional[ReadWriteLock] = None) -> None:
        self.lock = lock or ReadWriteLock()
        self.users: KeyedStore[User] = KeyedStore(
            make_id_policy(id_policy, USER_ID_PREFIX), lock=self.lock, name="user"
        )
        self.products: KeyedStore[Product] = KeyedStore(
            make_id_policy(id_policy, PRODUCT_ID_PREFIX), lock=self.lock, name="product"
        )

    @classmethod
    def with_sample_data(cls, id_policy: str = "sequential") -> "CatalogStore":
        """Return a catalog pre‑populated with the demo users and products."""
        catalog = cls(id_policy)
        catalog.load_sample_data()
        return catalog

    def load_sample_data(self) -> None:
        now = utcnow()
        alice_at = now - timedelta(hours=24)
        bob_at = now - timedelta(hours=12)
        laptop_at = now - timedelta(hours=48)
        mouse_at = now - timedelta(hours=36)

        self.users.seed(
            [
                User(
                    id="usr_001",
                    name="Alice Johnson",
                    email="alice@example.com",
                    role="admin",
                    created_at=alice_at,
                    updated_at=alice_at,
                ),
                User(
                    id="usr_002",
                    name="Bob Smith",
                    email="bob@example.com",
                    role="user",
                    created_at=bob_at,
                    updated_at=bob_at,
                ),
            ]
        )
        self.products.seed(
            [
                Product(
                    id="prd_001",
                    name="Laptop",
                    description="High-performance laptop",
                    price=999.99,
                    stock=10,
                    created_at=laptop_at,
                    updated_at=laptop_at,
                ),
                Product(
                    id="prd_002",
                    name="Mouse",
                    description="Wireless mouse",
                    price=29.99,
                    stock=50,
                    created_at=mouse_at,
                    updated_at=mouse_at,
                ),
            ]
        )

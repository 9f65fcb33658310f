from __future__ import annotations

from typing import Any, Protocol


class CustomerLike(Protocol):
    id: int
    name: str
    email: str

    def to_dict(self) -> dict[str, Any]: ...


class CustomerService:
    """
    Operations the HTTP layer calls. Each slice (in-memory, database) provides one.
    Ids arrive exactly as they appear in the URL; services do their own numeric coercion.
    """

    def find_all(self) -> list[CustomerLike]:
        raise NotImplementedError

    def find_one(self, customer_id: Any) -> CustomerLike:
        raise NotImplementedError

    def create(self, data: Any) -> CustomerLike:
        raise NotImplementedError

    def update(self, customer_id: Any, data: Any) -> CustomerLike:
        raise NotImplementedError

    def remove(self, customer_id: Any) -> CustomerLike:
        raise NotImplementedError

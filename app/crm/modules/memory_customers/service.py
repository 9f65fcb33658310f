from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any

from faker import Faker

from app.crm.errors import NotFoundError
from app.crm.service import CustomerService
from app.crm.validation import (
    CUSTOMER_FIELDS,
    coerce_customer_id,
    require_customer_fields,
    validate_customer_values,
    validate_dto_fields,
)

logger = logging.getLogger(__name__)


@dataclass
class CustomerRecord:
    id: int
    name: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class InMemoryCustomerService(CustomerService):
    """
    Customers kept in a plain list for the lifetime of the owning app.
    Not synchronized: the launcher runs a single sync worker.
    There is no delete here; `remove` stays unimplemented and no route reaches it.
    """

    customers: list[CustomerRecord] = field(default_factory=list)
    counter: int = 1

    def find_all(self) -> list[CustomerRecord]:
        return self.customers

    def find_one(self, customer_id: Any) -> CustomerRecord:
        wanted = coerce_customer_id(customer_id)
        for customer in self.customers:
            if wanted is not None and customer.id == wanted:
                return customer
        logger.debug("In-memory customer %s not found", customer_id)
        raise NotFoundError(f"Customer with ID {customer_id} not found.")

    def create(self, data: Any) -> CustomerRecord:
        validate_dto_fields(data, CUSTOMER_FIELDS)
        require_customer_fields(data)
        validate_customer_values(data)

        customer = CustomerRecord(id=self.counter, name=data["name"], email=data["email"])
        self.counter += 1
        self.customers.append(customer)
        logger.info("In-memory customer created id=%s", customer.id)
        return customer

    def update(self, customer_id: Any, data: Any) -> CustomerRecord:
        validate_dto_fields(data, CUSTOMER_FIELDS)
        customer = self.find_one(customer_id)
        validate_customer_values(data)

        if "name" in data:
            customer.name = data["name"]
        if "email" in data:
            customer.email = data["email"]
        logger.info("In-memory customer updated id=%s fields=%s", customer.id, sorted(data))
        return customer


def seed_customers(service: InMemoryCustomerService, count: int = 10, *, fake: Faker | None = None) -> list[CustomerRecord]:
    """Populate `service` with `count` generated customers through the normal create path."""
    fake = fake or Faker()
    created = [service.create({"name": fake.first_name(), "email": fake.email()}) for _ in range(count)]
    logger.info("Seeded %s in-memory customers", len(created))
    return created

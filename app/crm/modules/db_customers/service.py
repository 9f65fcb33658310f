from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy.orm import Session

from app.crm.errors import BadRequestError, NotFoundError
from app.crm.modules.db_customers.models import Customer
from app.crm.service import CustomerService
from app.crm.validation import (
    CUSTOMER_FIELDS,
    coerce_customer_id,
    require_customer_fields,
    validate_customer_values,
    validate_dto_fields,
)

logger = logging.getLogger(__name__)


class DatabaseCustomerService(CustomerService):
    """
    Customers stored in the `Customer` table.

    Every operation is one statement followed by a commit; concurrency control is
    left to the database.
    """

    def __init__(self, session_provider: Callable[[], Session]) -> None:
        self._session = session_provider

    def find_all(self) -> list[Customer]:
        customers = self._session().query(Customer).order_by(Customer.id).all()
        if not customers:
            raise NotFoundError("No customers found")
        return customers

    def find_one(self, customer_id: Any) -> Customer:
        wanted = coerce_customer_id(customer_id)
        customer = None
        if wanted is not None:
            customer = self._session().query(Customer).filter(Customer.id == wanted).one_or_none()
        if customer is None:
            logger.debug("Customer %s not found", customer_id)
            raise NotFoundError(f"Customer with ID {customer_id} not found.")
        return customer

    def create(self, data: Any) -> Customer:
        validate_dto_fields(data, CUSTOMER_FIELDS)
        require_customer_fields(data)
        validate_customer_values(data)

        s = self._session()
        customer = Customer(name=data["name"], email=data["email"])
        s.add(customer)
        s.flush()
        if customer.id is None:
            s.rollback()
            raise BadRequestError("Create customer failed")
        s.commit()
        logger.info("Customer created id=%s", customer.id)
        return customer

    def update(self, customer_id: Any, data: Any) -> Customer:
        customer = self.find_one(customer_id)
        validate_dto_fields(data, CUSTOMER_FIELDS)
        validate_customer_values(data)

        values = {k: data[k] for k in CUSTOMER_FIELDS if k in data}
        if not values:
            return customer

        s = self._session()
        updated = (
            s.query(Customer)
            .filter(Customer.id == customer.id)
            .update(values, synchronize_session="evaluate")
        )
        if not updated:
            s.rollback()
            raise BadRequestError("Failed to update customer")
        s.commit()
        logger.info("Customer updated id=%s fields=%s", customer.id, sorted(values))
        return customer

    def remove(self, customer_id: Any) -> Customer:
        customer = self.find_one(customer_id)

        s = self._session()
        deleted = (
            s.query(Customer)
            .filter(Customer.id == customer.id)
            .delete(synchronize_session="evaluate")
        )
        if not deleted:
            s.rollback()
            raise BadRequestError("Failed to delete customer")
        s.commit()
        logger.info("Customer removed id=%s", customer.id)
        return customer

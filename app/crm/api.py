from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from flask import Blueprint, current_app, jsonify, request

from app.crm.service import CustomerService

BODY_METHODS = ("POST", "PUT", "PATCH")


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    operation: str  # CustomerService method name
    status: int = 200


def _serialize(result):
    if isinstance(result, list):
        return [item.to_dict() for item in result]
    return result.to_dict()


def _make_view(route: Route, service_key: str) -> Callable:
    def view(customer_id: str | None = None):
        service: CustomerService = current_app.extensions[service_key]
        args: list = []
        if customer_id is not None:
            args.append(customer_id)
        if route.method in BODY_METHODS:
            args.append(request.get_json(silent=True))
        result = getattr(service, route.operation)(*args)
        return jsonify(_serialize(result)), route.status

    return view


def build_customer_blueprint(name: str, service_key: str, routes: Iterable[Route]) -> Blueprint:
    """
    Build a blueprint from a route table. Handlers pass path and body straight to the
    service found in `app.extensions[service_key]`; service errors go to the app error handlers.
    """
    bp = Blueprint(name, __name__)
    for route in routes:
        bp.add_url_rule(
            route.path,
            endpoint=route.operation,
            view_func=_make_view(route, service_key),
            methods=[route.method],
        )
    return bp

import logging
import uuid

from flask import Flask, g
from dotenv import load_dotenv

from app.crm import models  # noqa: F401  (registers ORM tables before the modules import them)
from app.crm.config import load_config
from app.crm.db import db_session, init_db, teardown_db_session
from app.crm.errors import register_error_handlers
from app.crm.routes import bp as routes_bp
from app.crm.modules.memory_customers.routes import SERVICE_KEY as MEMORY_SERVICE_KEY, bp as memory_customers_bp
from app.crm.modules.memory_customers.service import InMemoryCustomerService, seed_customers
from app.crm.modules.db_customers.routes import SERVICE_KEY as DB_SERVICE_KEY, bp as db_customers_bp
from app.crm.modules.db_customers.service import DatabaseCustomerService


def create_app() -> Flask:
    load_dotenv()
    app = Flask(__name__)
    app.config.from_mapping(load_config())
    app.json.sort_keys = False
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Production guardrails (fail fast with clear logs)
    env = (app.config.get("ENV") or "").strip().lower()
    if env in ("prod", "production") and not app.config.get("DATABASE_URL"):
        raise RuntimeError("DATABASE_URL is required in production.")

    init_db(app)

    memory_service = InMemoryCustomerService()
    seed_customers(memory_service, app.config["SEED_COUNT"])
    app.extensions[MEMORY_SERVICE_KEY] = memory_service
    app.extensions[DB_SERVICE_KEY] = DatabaseCustomerService(db_session)

    @app.before_request
    def _assign_request_id():
        g.request_id = uuid.uuid4().hex

    register_error_handlers(app)

    app.register_blueprint(routes_bp)
    app.register_blueprint(memory_customers_bp)
    app.register_blueprint(db_customers_bp, url_prefix="/customers")

    app.teardown_appcontext(teardown_db_session)

    logging.getLogger(__name__).info(
        "create_app() complete; %s in-memory customers seeded", len(memory_service.customers)
    )
    return app

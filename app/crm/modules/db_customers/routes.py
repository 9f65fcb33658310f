from app.crm.api import Route, build_customer_blueprint

SERVICE_KEY = "db_customer_service"

ROUTES = (
    Route("GET", "/all", "find_all"),
    Route("GET", "/info/<customer_id>", "find_one"),
    Route("POST", "/create", "create", status=201),
    Route("PUT", "/update/<customer_id>", "update"),
    Route("DELETE", "/remove/<customer_id>", "remove"),
)

bp = build_customer_blueprint("db_customers", SERVICE_KEY, ROUTES)

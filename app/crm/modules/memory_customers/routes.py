from app.crm.api import Route, build_customer_blueprint

SERVICE_KEY = "memory_customer_service"

ROUTES = (
    Route("GET", "/all", "find_all"),
    Route("GET", "/info/<customer_id>", "find_one"),
    Route("POST", "/create", "create", status=201),
    Route("PUT", "/update/<customer_id>", "update"),
)

bp = build_customer_blueprint("memory_customers", SERVICE_KEY, ROUTES)

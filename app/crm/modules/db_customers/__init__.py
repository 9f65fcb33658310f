"""
Database customers.

- `Customer` table through the SQLAlchemy ORM (schema managed by alembic)
- Full CRUD under /customers, including /customers/remove/<id>
- Listing an empty table is a 404, unlike the in-memory slice
"""

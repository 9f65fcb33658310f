"""
In-memory customers.

- Customers live in a list owned by the app (no persistence, no delete)
- Seeded with generated customers at startup
- Mounted at the application root: /all, /info/<id>, /create, /update/<id>
"""

"""
Persistence helpers: schema, connection pool and snapshot queries.
"""

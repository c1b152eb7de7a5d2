"""
Cross-cutting building blocks shared by the `users/` and `posts/` features.

Settings, logging, the DB pool, request middleware, and the outcome type
that handlers render into HTTP responses all live here. Entity-specific SQL
stays in each feature's `repository.py`.
"""

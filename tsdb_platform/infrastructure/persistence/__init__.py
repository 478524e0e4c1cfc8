"""SQL persistence: async engine, ORM models and repositories."""

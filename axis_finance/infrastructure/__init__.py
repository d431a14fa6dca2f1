"""Infrastructure adapters: database, records store, settings and logging."""

"""Application services built on the core binder."""

"""Application services (orchestration over domain and adapters)."""

"""FastAPI application, services, entities and runtime configuration."""

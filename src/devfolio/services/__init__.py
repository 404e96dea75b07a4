"""Service layer: one module per table plus auth and the session gate."""

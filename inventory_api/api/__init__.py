"""HTTP layer: routes and request dependencies."""

"""HTTP layer: envelope rendering, exceptions and routes."""

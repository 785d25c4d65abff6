"""Web layer: request scoped page state, URL helpers and HTML components."""

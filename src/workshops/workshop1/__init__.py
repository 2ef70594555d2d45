"""Workshop 1: routes, path parameters and query strings."""

"""Workshop 4: route guards, a relational user table and a realtime SPA."""

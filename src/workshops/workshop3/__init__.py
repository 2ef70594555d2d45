"""Workshop 3: sessions, password hashing, a toy wiki and avatar uploads."""

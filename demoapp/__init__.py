"""Users demo API: a small CRUD service over a file-seeded, in-memory user list."""

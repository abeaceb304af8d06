"""HTTP primitives — request parsing, headers, response entity and serialization."""

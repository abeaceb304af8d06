"""Server — listener loop, per-connection pipeline, and response sending."""

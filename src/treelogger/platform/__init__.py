"""Process-level integrations (diagnostics logging)."""

"""Platform integrations (logging, external tools)."""

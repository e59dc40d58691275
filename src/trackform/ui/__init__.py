"""User interfaces for Trackform."""

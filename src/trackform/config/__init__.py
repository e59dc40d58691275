"""Configuration package for Trackform."""

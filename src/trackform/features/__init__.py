"""Feature packages for Trackform."""

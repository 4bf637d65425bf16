"""Translation framework for IRC services."""

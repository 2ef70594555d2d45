"""Building blocks registered by every workshop application."""

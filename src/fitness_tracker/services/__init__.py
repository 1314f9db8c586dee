"""Read-side services built on stored records."""

"""Infrastructure: adapters for the domain ports."""

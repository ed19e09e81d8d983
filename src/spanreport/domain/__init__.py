"""Domain layer: diagnostic value objects, ports and exceptions."""

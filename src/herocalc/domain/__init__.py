"""Domain model: definitions, entities and rules."""

"""Domain layer: entity status values and domain exceptions."""

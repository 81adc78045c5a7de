"""Engine layer: compiles rule specs into schemas and evaluates them."""

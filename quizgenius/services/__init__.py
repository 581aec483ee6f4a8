"""Service layer between HTTP routes and the generation model."""

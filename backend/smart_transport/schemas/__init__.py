"""Request Schemas: Pydantic models for the three resources' request bodies."""

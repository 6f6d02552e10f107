"""Domain models and API request/response schemas."""

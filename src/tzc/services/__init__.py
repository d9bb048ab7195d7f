"""Service layer: orchestrates the domain and returns ServiceResult."""

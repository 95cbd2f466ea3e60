"""DTO."""

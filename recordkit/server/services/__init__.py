"""Dependencies shared by the API and page endpoints."""

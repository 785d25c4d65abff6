"""FastAPI server exposing recordkit entries as JSON and as rendered HTML pages."""

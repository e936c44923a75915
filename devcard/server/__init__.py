"""Server package - local FastAPI app serving the HTML card."""

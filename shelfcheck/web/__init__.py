"""Interface web (FastAPI) de ShelfCheck."""

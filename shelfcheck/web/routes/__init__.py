"""Routes HTTP de ShelfCheck."""

"""In-memory event board: events, locations, users and participants."""

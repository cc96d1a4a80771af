"""File helpers around the season statistics engine."""

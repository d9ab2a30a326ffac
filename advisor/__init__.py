"""NYC high school program advisor: scoring engine and HTTP API."""

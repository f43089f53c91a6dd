"""Settings, logging, error handling and dependencies shared by the API."""

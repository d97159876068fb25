"""Configuration, logging, identifier parsing and MongoDB access."""

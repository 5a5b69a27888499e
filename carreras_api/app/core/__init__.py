"""Configuration, logging, errors and key-value store integration."""

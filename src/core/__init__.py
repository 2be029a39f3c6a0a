"""Core: domain values, configuration, logging and services."""

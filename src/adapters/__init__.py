"""Adapters for the edges of the program: text input and JSON reports."""

"""Contains classes and functions used across all other ``proptree`` packages."""

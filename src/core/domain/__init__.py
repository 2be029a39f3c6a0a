"""Domain layer: national numbers, check digits and categories.

Pure values and functions. Nothing here reads files, prints or logs.
"""

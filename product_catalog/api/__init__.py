"""
Product catalog REST API package.
"""

"""
REST API application package.
"""

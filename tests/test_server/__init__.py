"""
HTTP Server Tests

Exercises the Flask routes through the test client.
"""

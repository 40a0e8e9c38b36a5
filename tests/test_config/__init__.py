"""
Configuration Tests
"""

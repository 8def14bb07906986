"""
Cross-app test suite for the livestock surveillance API.
"""

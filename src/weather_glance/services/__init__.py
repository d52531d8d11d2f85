"""
Shared service utilities.

- http.py - HTTP session used by every datasource (default timeout, no retries)
"""

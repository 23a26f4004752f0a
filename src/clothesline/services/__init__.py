"""
Shared utilities.

- http.py - ``requests.Session`` with default timeout, used by every datasource
"""

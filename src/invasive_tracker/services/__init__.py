"""
Shared service utilities.

- http.py - requests session and the transport used by the table client
"""

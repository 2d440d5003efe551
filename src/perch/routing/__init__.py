"""Routing: path templates compiled once and matched many times.

Patterns are validated and compiled at construction so a malformed
route fails at table-build time, never while serving a request.
"""

"""
logburst

Finds the client IPs behind the largest bursts of matching requests in
web-server access logs.
"""

__version__ = "0.1.0"

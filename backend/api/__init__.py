"""
HTTP routers, mounted under the versioned API prefix by main.py.
"""

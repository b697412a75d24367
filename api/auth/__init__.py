"""
Admin authentication: password login, server-side sessions, the admin gate
and the startup admin bootstrap.
"""

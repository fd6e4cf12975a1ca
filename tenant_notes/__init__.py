"""
Tenant Notes - multi-tenant note-taking backend
"""

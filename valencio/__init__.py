"""
Valencio storefront: admin activation, session cookies and store settings
"""
__version__ = "0.1.0"

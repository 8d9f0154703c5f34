"""
Core components: placeholder engine and preview colour schemes.
"""

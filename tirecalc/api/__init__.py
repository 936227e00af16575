"""
HTTP API for tirecalc.
"""

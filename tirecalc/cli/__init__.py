"""
Command-line interface for tirecalc.
"""

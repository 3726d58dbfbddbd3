"""
Achievement analysis package.
"""

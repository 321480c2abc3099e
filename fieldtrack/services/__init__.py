"""
fieldtrack services package.
"""

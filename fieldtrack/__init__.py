"""
fieldtrack - visit location labelling for the field sales tracker.

Resolves country and region labels for GPS-tagged visit records.
Server geocoding is preferred; static bounding boxes are the fallback.
"""

__version__ = "1.0.0"

"""
yc_dashboard package marker.
"""

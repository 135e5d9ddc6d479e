"""
yc_dashboard/services package marker.
"""

"""
Clan events: per-member attendance records (date, event name, status).
"""

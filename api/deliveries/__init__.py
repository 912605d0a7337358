"""
Clan deliveries: items handed to members (date, nick, class, description).
"""

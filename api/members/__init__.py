"""
Clan members: roster rows with nick, level, power and class.
"""

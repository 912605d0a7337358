"""
Clan repository: stock of items (name, type, boss it dropped from, quantity).
"""

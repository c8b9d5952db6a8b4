"""
Combat system module for the game.

This module handles the resolution of player actions, the enemy turn and the
enemy's fixed-probability action choice.
"""

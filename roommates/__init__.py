"""Roommates household app: chore store and its HTTP/console front-ends."""

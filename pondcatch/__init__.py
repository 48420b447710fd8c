"""
Pond Catch
==========

Catch falling fish with a net before they leave the pond. Each species is
worth different points, every catch makes the fish fall faster, and three
missed fish end the session.

- catch_core: game simulation, Gymnasium environment, headless renderer
- evaluation: seed-bank harness for scoring agents

All tunable parameters are in game_config.yaml.
"""

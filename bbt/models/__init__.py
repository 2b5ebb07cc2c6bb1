"""
Models Module
=============

This module contains the rating update engines. Each one takes the finishing order of a match between
teams and updates the skill belief of every player taking part.

Included Rating Systems:
- Weng-Lin: The Bayesian approximation of Weng and Lin, using either the Thurstone-Mosteller (gaussian) or
  the Bradley-Terry (logistic) model for the virtual duels between teams.

"""

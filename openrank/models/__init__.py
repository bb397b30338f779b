"""
Models Module
=============

This module contains the Weng-Lin family of Bayesian online rating systems for matches between any number of teams of any size, with ties and partial rankings.

Included Rating Systems:
- Bradley-Terry Full: logistic comparisons between every pair of teams.
- Bradley-Terry Partial: logistic comparisons between rank adjacent teams only.
- Plackett-Luce: the ranking is modelled as a sequence of eliminations sharing one scale across all teams.
- Thurstone-Mosteller Full: gaussian comparisons between every pair of teams, with a draw margin.
- Thurstone-Mosteller Partial: gaussian comparisons between rank adjacent teams only, with a draw margin.

Each rating system is a subclass of openrank.core.base.TeamRatingSystem and exposes rate(teams, ranks=None, scores=None, weights=None), which returns new ratings without modifying its inputs. The full variants cost O(T^2) comparisons for T teams while the partial variants cost O(T).

"""

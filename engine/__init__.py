"""Tic-tac-toe engine: board rules, optimal search, configuration."""

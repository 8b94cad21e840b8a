"""Tic-tac-toe board and game loop, with a UDP server and client for joining a game."""

__version__ = "0.1.0"
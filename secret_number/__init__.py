"""
Secret Number - Number guessing game engine

A small, host-agnostic engine for the classic "guess the secret number" game.
The engine provides:
- Non-repeating secret draws across a full cycle of the range
- A game session state machine (ready, in progress, won, lost)
- Guess evaluation with directional feedback
- Hosts: REST/WebSocket API and an interactive terminal game
"""

__version__ = "0.1.0"

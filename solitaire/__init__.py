"""Bulgarian Solitaire simulator.

Modules:
- game/board.py: SolitaireBoard, the pile store and round rules
- game/encoding.py: configuration parsing and hashing
- sim/runner.py: game loop, history and batch statistics
- simulator.py: console driver
"""

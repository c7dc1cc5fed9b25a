"""Core types shared by every game system.

This package contains the engine-independent building blocks:
- data/: rule constants, enums and plain record types
- events/: publisher-subscriber event bus and event definitions
- engine/: command actions and the game session state
- errors.py: the fatal input error
"""

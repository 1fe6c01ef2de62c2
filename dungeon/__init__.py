"""
Dungeon inventory grid subsystem.
Grid layout configuration, first-fit item placement and per-tick sim event handling.
"""

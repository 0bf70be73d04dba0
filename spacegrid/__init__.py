"""Game objects for a space construction game: items, inventories, factions, block definitions, a block catalogue and placed blocks with deltas."""

__version__ = "0.1.0"
"""Scryfall to MTG Arena card data preprocessing."""

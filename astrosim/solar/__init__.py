"""Celestial bodies under mutual Newtonian gravity, and a text viewer for them."""
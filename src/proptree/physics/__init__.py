"""Orbital mechanics helpers needed to evaluate ephemerides & declared body states."""

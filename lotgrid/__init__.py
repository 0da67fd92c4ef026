"""Editable vehicle listing grid with a live price total."""

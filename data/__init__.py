"""Startdaten für das Zimmerregister."""

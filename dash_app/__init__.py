"""Dash front end for the BRICS maternal mortality dashboard."""

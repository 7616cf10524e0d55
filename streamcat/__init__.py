"""Fetch a list of addresses and concatenate their bodies into one file."""

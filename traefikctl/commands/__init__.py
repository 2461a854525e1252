"""Listing, updating and removing route and middleware files in a configuration directory."""
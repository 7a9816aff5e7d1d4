"""Opportunity store and resume analyzer behind the PathFinder API."""

"""Explore With Me Gateway — validates incoming requests and forwards them to the main server."""

"""Librus core: session, transport, decoding and content helpers."""

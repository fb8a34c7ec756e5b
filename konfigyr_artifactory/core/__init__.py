"""Stateless services over the value models: validation, wire codec, checksums."""

"""Search engine, constraints and configuration for the multiword anagram solver."""

"""Subway line section graphs: ordered paths built from unordered sections."""

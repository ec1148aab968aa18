"""Collaborator contracts and their concrete implementations."""

"""Configuration, models, exceptions and helpers shared across TubeBrief."""

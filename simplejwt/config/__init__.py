"""Configuration for SimpleJWT. Secrets are never part of configuration."""

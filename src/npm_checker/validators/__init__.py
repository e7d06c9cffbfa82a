"""Schema validation for user-supplied inputs."""

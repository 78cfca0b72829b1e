"""Docker Scaffold -- generates Docker, Compose and GitHub Actions files.

Collects project configuration from command-line flags and interactive
prompts, then renders a ``Dockerfile``, ``docker-compose.yml``,
``.dockerignore`` and ``.github/workflows/deploy.yml`` into the current
directory.
"""

__version__ = "1.0.0"

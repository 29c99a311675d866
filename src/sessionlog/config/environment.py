"""
Environment Configuration.

The environment is taken from `SL_ENV` and decides which .env files are read.
"""

import os


def get_env_files() -> tuple[str, ...]:
    """
    The .env files to load for the current `SL_ENV`, lowest priority first.

    Later files override earlier ones:
    1. `.env`
    2. `.env.local`
    3. `.env.{environment}`
    4. `.env.{environment}.local`
    """
    env = os.getenv("SL_ENV", "development")
    return (
        ".env",
        ".env.local",
        f".env.{env}",
        f".env.{env}.local",
    )

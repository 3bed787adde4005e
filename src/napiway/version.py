"""Version of the napiway generator."""

VERSION = "0.3.0"

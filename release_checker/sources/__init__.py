"""
Release API platforms and their response extraction rules.
"""

from .base import BaseReleaseSource
from .github import GitHubSource
from .modrinth import ModrinthSource
from .platform import Platform
from .spigot import SpigotSource

__all__ = ["BaseReleaseSource", "SpigotSource", "ModrinthSource", "GitHubSource", "Platform"]

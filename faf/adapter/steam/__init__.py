"""Steam adapter."""

from .client import MockSteamClient, RealSteamClient

__all__ = ["MockSteamClient", "RealSteamClient"]

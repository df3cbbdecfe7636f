from __future__ import annotations

"""Exceptions for conditions that abort a whole import run."""


class SkinFetchError(Exception):
    """Base class; the CLI turns any of these into a non-zero exit."""


class TransportError(SkinFetchError):
    """The request failed or the body was not JSON."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
        self.reason = reason


class InspectionContractError(SkinFetchError):
    """The inspection API answered without an error and without a usable ``iteminfo``."""


class InventoryUnavailableError(SkinFetchError):
    """The inventory service reported ``success=false`` or sent a malformed snapshot."""


class ConfigMarkerError(SkinFetchError):
    """The target config has no ``"Items": [`` marker to insert after."""


class UsageError(ValueError):
    """The requested combination of inputs can't run (bad mode or limit)."""

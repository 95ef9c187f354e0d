"""Offline transports returning canned vendor responses."""

from .transport import CannedTransport, canned_transport, fixture_transport, load_fixture_catalog

__all__ = ["CannedTransport", "canned_transport", "fixture_transport", "load_fixture_catalog"]

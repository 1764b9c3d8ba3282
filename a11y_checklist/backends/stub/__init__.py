"""Stub measurement backend module."""

from a11y_checklist.backends.stub.backend import StubBackend
from a11y_checklist.backends.stub.config import StubBackendConfig
from a11y_checklist.backends.stub.manifest import stub_manifest

__all__ = ["StubBackend", "StubBackendConfig", "stub_manifest"]

"""Stub backend manifest."""

from a11y_checklist.backends.manifest import BackendManifest
from a11y_checklist.backends.stub.backend import StubBackend
from a11y_checklist.backends.stub.config import StubBackendConfig

stub_manifest = BackendManifest(
    config_cls=StubBackendConfig,
    backend_factory=StubBackend.from_config,
)

"""Configuration for the stub backend."""

from pydantic import BaseModel


class StubBackendConfig(BaseModel):
    """Configuration for the stub backend.

    The stub takes no options; the model exists so every backend is built
    from a validated config.
    """

import pytest


class FakeGateway:
    """Stands in for GatewayClient; records every call it receives."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def complete(self, prompts, model=None, temperature=None):
        self.calls.append({"prompts": prompts, "model": model, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def fake_gateway():
    def _make(content=None, error=None):
        return FakeGateway(content=content, error=error)
    return _make


@pytest.fixture(autouse=True)
def _no_gateway_env(monkeypatch):
    for name in ("LOVABLE_API_KEY", "AI_GATEWAY_URL", "AI_MODEL", "VALIDATE_AI_OUTPUT"):
        monkeypatch.delenv(name, raising=False)

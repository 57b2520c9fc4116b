import httpx

from portfolio_gateway.config import Settings


def make_settings(**overrides) -> Settings:
    values = {
        "GEMINI_API_KEY": "test-key",
        "STATIC_DIR": "does-not-exist",
        "LOG_LEVEL": "DEBUG",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class SleepRecorder:
    """Stands in for asyncio.sleep and remembers every requested delay."""

    def __init__(self):
        self.delays = []

    async def __call__(self, seconds):
        self.delays.append(seconds)


class ScriptedGemini:
    """MockTransport handler that replays a fixed list of provider outcomes.

    Each step is either an httpx.Response or an exception instance to raise.
    """

    def __init__(self, steps):
        self.steps = list(steps)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.steps[len(self.requests) - 1]
        if isinstance(step, Exception):
            raise step
        return step

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def ok(text="Generated reply"):
    return httpx.Response(
        200, json={"candidates": [{"content": {"parts": [{"text": text}]}}]}
    )


def status(code, body=None):
    return httpx.Response(code, json=body if body is not None else {"error": {"code": code}})


class FakeRemote:
    """Records calls made in place of call_gemini_with_retry."""

    def __init__(self, reply="Generated reply", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def __call__(self, prompt, system, settings, max_retries):
        self.calls.append((prompt, system, max_retries))
        if self.error is not None:
            raise self.error
        return self.reply

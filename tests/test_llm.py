from types import SimpleNamespace

import pytest
from openai import OpenAIError

from balance_engine.config import Settings
from balance_engine.errors import ConfigError, UpstreamUnavailable
from balance_engine.llm import make_model_invoker


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.calls = []
        self._content = content
        self._error = error

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        message = SimpleNamespace(content=self._content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(completions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def test_invoker_sends_single_user_message():
    completions = FakeCompletions(content='{"balanceScore": 80}')
    invoke = make_model_invoker(Settings(model="test-model", max_tokens=123), client=fake_client(completions))

    assert invoke("hello") == '{"balanceScore": 80}'
    assert completions.calls == [
        {"model": "test-model", "max_tokens": 123, "messages": [{"role": "user", "content": "hello"}]}
    ]


def test_invoker_wraps_sdk_errors():
    invoke = make_model_invoker(Settings(), client=fake_client(FakeCompletions(error=OpenAIError("boom"))))
    with pytest.raises(UpstreamUnavailable):
        invoke("hello")


def test_invoker_rejects_empty_content():
    invoke = make_model_invoker(Settings(), client=fake_client(FakeCompletions(content="")))
    with pytest.raises(UpstreamUnavailable):
        invoke("hello")


def test_invoker_requires_api_key():
    with pytest.raises(ConfigError):
        make_model_invoker(Settings(openai_api_key=None))

import json
import os
from typing import Any, Dict, List, Optional

# Must run before config.settings is imported anywhere
os.environ["LOG_TO_FILE"] = "false"
os.environ["OPENAI_API_KEY"] = ""

import pytest
import requests


def make_response(status_code: int, payload: Any = None) -> requests.Response:
    r = requests.Response()
    r.status_code = status_code
    r._content = json.dumps(payload).encode("utf-8") if payload is not None else b""
    r.url = "https://clinicaltrials.gov/api/v2/studies"
    return r


def make_study(nct_id: str, title: str, condition: Optional[str] = None, country: Optional[str] = None) -> Dict[str, Any]:
    ps: Dict[str, Any] = {"identificationModule": {"nctId": nct_id, "briefTitle": title}}
    if condition:
        ps["conditionsModule"] = {"conditions": [condition]}
    if country:
        ps["contactsLocationsModule"] = {"locations": [{"country": country, "city": "Somewhere"}]}
    return {"protocolSection": ps}


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, response: Optional[requests.Response] = None, exc: Optional[Exception] = None):
        self.response = response
        self.exc = exc
        self.calls: List[Dict[str, Any]] = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


class _Msg:
    def __init__(self, content):
        self.content = content


class _Choice:
    def __init__(self, content):
        self.message = _Msg(content)


class _Resp:
    def __init__(self, content):
        self.choices = [_Choice(content)]


class _Completions:
    def __init__(self, owner):
        self.owner = owner

    def create(self, model, messages, max_tokens):
        self.owner.calls.append({"model": model, "messages": messages, "max_tokens": max_tokens})
        if self.owner.exc is not None:
            raise self.owner.exc
        return _Resp(self.owner.content)


class _Chat:
    def __init__(self, owner):
        self.completions = _Completions(owner)


class FakeOpenAI:
    """Mimics OpenAI().chat.completions.create."""

    def __init__(self, content: Optional[str] = "You may qualify.", exc: Optional[Exception] = None):
        self.content = content
        self.exc = exc
        self.calls: List[Dict[str, Any]] = []
        self.chat = _Chat(self)


@pytest.fixture
def asthma_session():
    payload = {"studies": [make_study("NCT05550001", "Asthma Trial A", "Asthma", "Canada")]}
    return FakeSession(make_response(200, payload))

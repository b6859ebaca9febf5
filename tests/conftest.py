"""Shared pytest fixtures and configuration for the resource-cli suite.

Guidelines
----------
* No network, no filesystem, no OS state.
* Resources are plain handlers registered on a ResourceRouter that is
  passed to the command explicitly.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from resource_cli.core.models import ActionOutcome, CommandSchema, Verb
from resource_cli.core.schema import define_command, option
from resource_cli.infra.router import ResourceRouter

GREETING_URI = "app://self/greeting"
ERROR_URI = "app://self/error"

_GREETINGS: dict[str, str] = {
    "ja": "こんにちは, {name}",
    "fr": "Bonjour, {name}",
    "es": "¡Hola, {name}",
}


def greet(params: Mapping[str, Any]) -> ActionOutcome:
    template = _GREETINGS.get(params["lang"], "Hello, {name}")
    return ActionOutcome(
        200,
        {
            "greeting": template.format(name=params["name"]),
            "timestamp": 1699686400,
            "lang": params["lang"],
        },
    )


def post_greeting(params: Mapping[str, Any]) -> ActionOutcome:
    return ActionOutcome(201, {"created": True})


def error_status(params: Mapping[str, Any]) -> ActionOutcome:
    code = params["code"]
    message = {
        400: "Bad Request",
        404: "Not Found",
        500: "Internal Server Error",
    }.get(code, "Unknown Error")
    return ActionOutcome(code, {"message": message})


@pytest.fixture()
def greeting_schema() -> CommandSchema:
    return define_command(
        "greeting",
        "Say hello in multiple languages",
        uri=GREETING_URI,
        output="greeting",
        options=[
            option("name", "n", "Name to greet", required=True),
            option("lang", "l", "Language (en, ja, fr, es)", default="en"),
        ],
    )


@pytest.fixture()
def post_schema() -> CommandSchema:
    return define_command(
        "post-greeting",
        "Create a greeting",
        uri=GREETING_URI,
        method="onPost",
    )


@pytest.fixture()
def error_schema() -> CommandSchema:
    return define_command(
        "error",
        "Resource that produces errors",
        uri=ERROR_URI,
        output="message",
        options=[option("code", "c", "Status code", required=True, type="int")],
    )


@pytest.fixture()
def router() -> ResourceRouter:
    r = ResourceRouter()
    r.add(Verb.GET, GREETING_URI, greet)
    r.add(Verb.POST, GREETING_URI, post_greeting)
    r.add(Verb.GET, ERROR_URI, error_status)
    return r

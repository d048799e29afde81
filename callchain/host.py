"""Sample host scope used by the CLI.

Shows what a host usually injects: a namespace object carrying a logging
function whose return value can be called again, a plain function, and a
constant.
"""
from __future__ import annotations
from typing import Any, Callable


def demo_scope(out: Callable[..., Any] = print) -> dict[str, Any]:
    def third_call():
        out("===>> third call")

    def second_call():
        out("console log return function ===>> chained call")
        return third_call

    def log(*args):
        out(*args)
        out("log finished")
        return second_call

    def test_log(*args):
        out(*args)

    return {
        "myConsole": {"log": log},
        "testLog": test_log,
        "globalValue": "==> hello word4",
    }

import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def api_event() -> Callable[..., dict[str, Any]]:
    """
    Build an API Gateway proxy event.

    Usage:
        api_event(owner_id=7, role="admin", path_params={...}, body={...})

    Pass ``owner_id=None`` to build an unauthenticated event.
    """

    def _build(
        *,
        owner_id: int | None = 7,
        role: str = "user",
        method: str = "GET",
        path_params: dict[str, Any] | None = None,
        query_params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> dict[str, Any]:
        event: dict[str, Any] = {
            "httpMethod": method,
            "path": "/test",
            "pathParameters": path_params,
            "queryStringParameters": query_params,
            "headers": {"Content-Type": "application/json"},
            "requestContext": {"authorizer": {}},
        }
        if owner_id is not None:
            event["requestContext"]["authorizer"] = {"owner_id": str(owner_id), "role": role}
        if body is not None:
            event["body"] = body if isinstance(body, str) else json.dumps(body)
        return event

    return _build

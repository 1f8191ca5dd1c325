"""Unit tests for the chat endpoint clients."""
import json

import httpx
import pytest

from soudan.chat import (
    FALLBACK_REPLY,
    ChatEndpoint,
    ChatEndpointError,
    ConversationController,
    HttpChatEndpoint,
    Turn,
    parse_reply,
)

URL = "http://chat.test/api/chat"


def make_endpoint(handler) -> HttpChatEndpoint:
    """Endpoint whose requests are answered by ``handler``."""
    return HttpChatEndpoint(URL, transport=httpx.MockTransport(handler))


class TestChatEndpoint:
    """Tests for the ChatEndpoint interface."""

    def test_endpoint_is_abstract(self):
        """Test that ChatEndpoint cannot be instantiated directly."""
        with pytest.raises(TypeError):
            ChatEndpoint()  # type: ignore


class TestParseReply:
    """Tests for reply interpretation."""

    def test_success_body(self):
        """Test that content[0].text is returned."""
        assert parse_reply({"content": [{"type": "text", "text": "やあ"}]}) == "やあ"

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"error": {"message": "rate limited"}},
            {"content": None},
            {"content": [{"text": None}]},
            "text",
            42,
            None,
        ],
    )
    def test_unusable_bodies(self, body):
        """Test that bodies without text yield None."""
        assert parse_reply(body) is None

    def test_content_wins_over_error(self):
        """Test that a body with both fields is read as a reply."""
        assert parse_reply({"content": [{"text": "ok"}], "error": None}) == "ok"


class TestHttpChatEndpoint:
    """Tests for HttpChatEndpoint."""

    @pytest.mark.asyncio
    async def test_posts_message_history(self):
        """Test the request method, URL and JSON body."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["url"] = str(request.url)
            captured["content_type"] = request.headers["content-type"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"content": [{"text": "はい"}]})

        async with make_endpoint(handler) as endpoint:
            data = await endpoint.send([Turn.user("元気です")])

        assert captured["method"] == "POST"
        assert captured["url"] == URL
        assert captured["content_type"].startswith("application/json")
        assert captured["body"] == {"messages": [{"role": "user", "content": "元気です"}]}
        assert data == {"content": [{"text": "はい"}]}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 500, 502])
    async def test_error_status_raises(self, status):
        """Test that non-2xx responses raise ChatEndpointError."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, json={"error": "nope"})

        async with make_endpoint(handler) as endpoint:
            with pytest.raises(ChatEndpointError, match=str(status)):
                await endpoint.send([Turn.user("hi")])

    @pytest.mark.asyncio
    async def test_connection_error_raises(self):
        """Test that transport errors are wrapped."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with make_endpoint(handler) as endpoint:
            with pytest.raises(ChatEndpointError) as exc_info:
                await endpoint.send([Turn.user("hi")])

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self):
        """Test that a non-JSON body is a transport failure."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        async with make_endpoint(handler) as endpoint:
            with pytest.raises(ChatEndpointError, match="Invalid JSON"):
                await endpoint.send([Turn.user("hi")])

    @pytest.mark.asyncio
    async def test_debug_callback_traces_requests(self):
        """Test that requests are traced under the HTTP component."""
        events = []

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"content": [{"text": "ok"}]})

        async with make_endpoint(handler) as endpoint:
            endpoint.set_debug_callback(lambda *event: events.append(event))
            await endpoint.send([Turn.user("hi")])

        assert ("debug", "HTTP", f"POST {URL} (1 messages)") in events
        assert ("debug", "HTTP", "Response status 200") in events

    def test_url_property(self):
        """Test that the configured URL is exposed."""
        endpoint = HttpChatEndpoint(URL, timeout=30.0)
        assert endpoint.url == URL


class TestControllerOverHttp:
    """End-to-end tests: controller plus HTTP endpoint on a mock transport."""

    @pytest.mark.asyncio
    async def test_reply_round(self):
        """Test a successful exchange through the HTTP client."""
        def handler(request: httpx.Request) -> httpx.Response:
            messages = json.loads(request.content)["messages"]
            return httpx.Response(200, json={"content": [{"text": f"{len(messages)}件"}]})

        async with make_endpoint(handler) as endpoint:
            controller = ConversationController(endpoint)
            await controller.submit("元気です")
            await controller.submit("また来ました")

        assert controller.history[2].content == "1件"
        assert controller.history[4].content == "3件"

    @pytest.mark.asyncio
    async def test_error_body_with_500_falls_back(self):
        """Test that an error response becomes the fallback turn."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"error": "Internal error"})

        async with make_endpoint(handler) as endpoint:
            controller = ConversationController(endpoint)
            await controller.submit("hi")

        assert controller.history[-1].content == FALLBACK_REPLY
        assert controller.pending is False

    @pytest.mark.asyncio
    async def test_error_body_with_200_falls_back(self):
        """Test that an error body is never shown as a reply."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"error": "quota"})

        async with make_endpoint(handler) as endpoint:
            controller = ConversationController(endpoint)
            await controller.submit("hi")

        assert controller.history[-1].content == FALLBACK_REPLY

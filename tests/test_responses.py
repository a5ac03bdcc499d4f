"""Tests for MCP tool responses."""

from tool_output.exceptions import FormatterError, MaxDepthExceededError
from tool_output.responses import create_error_response, create_tool_response


class ClientError(Exception):
    """Error carrying a response body, like an HTTP client error."""

    def __init__(self, message: str, body: dict) -> None:
        super().__init__(message)
        self.body = body


class TestCreateToolResponse:
    """Tests for create_tool_response."""

    def test_formats_result(self) -> None:
        """Structured results are formatted as tabular text."""
        content = create_tool_response(
            {"orderId": "order-1", "lineItems": []},
            title="order",
        )

        assert len(content) == 1
        assert content[0].type == "text"
        assert content[0].text == "ORDER\nOrder Id: order-1\nLine Items: none"

    def test_json_format(self) -> None:
        """The output format is passed through."""
        content = create_tool_response({"orderId": "order-1"}, output_format="json")
        assert content[0].text == '{"orderId":"order-1"}'

    def test_string_passthrough(self) -> None:
        """String results are not formatted again."""
        content = create_tool_response("Relevant tools:\nname: read_order")
        assert content[0].text == "Relevant tools:\nname: read_order"


class TestCreateErrorResponse:
    """Tests for create_error_response."""

    def test_plain_exception(self) -> None:
        """Exceptions without a body repeat their message."""
        content = create_error_response(ValueError("bad input"), "read_order")
        assert content[0].type == "text"
        assert content[0].text == "Error executing tool 'read_order': bad input - bad input"

    def test_exception_with_body(self) -> None:
        """Error bodies are pretty-printed as JSON."""
        error = ClientError("Not found", body={"statusCode": 404})
        content = create_error_response(error, "read_order")
        assert content[0].text == (
            "Error executing tool 'read_order': Not found - {\n  \"statusCode\": 404\n}"
        )

    def test_formatter_error_details(self) -> None:
        """Formatter error details are used as the body."""
        content = create_error_response(MaxDepthExceededError(3), "read_cart")
        assert content[0].text.startswith(
            "Error executing tool 'read_cart': Value nesting exceeds maximum depth of 3"
        )
        assert content[0].text.endswith('{\n  "max_depth": 3\n}')

    def test_formatter_error_without_details(self) -> None:
        """Errors with empty details fall back to their message."""
        content = create_error_response(FormatterError("boom"), "read_cart")
        assert content[0].text == "Error executing tool 'read_cart': boom - boom"

    def test_exception_with_empty_body(self) -> None:
        """An empty body is still shown as JSON."""
        error = ClientError("Bad request", body={})
        content = create_error_response(error, "update_cart")
        assert content[0].text == "Error executing tool 'update_cart': Bad request - {}"

import pytest

from src.core.errors import GitHubGraphQLError, RepositoryNotFoundError
from src.integrations.github.classifier import (
    DEFAULT_GRAPHQL_MESSAGE,
    DEFAULT_NOT_FOUND_MESSAGE,
    GraphQLMessage,
    GraphQLNotFound,
    GraphQLRateLimited,
    GraphQLUnknown,
    classify_response,
    first_error_shape,
    parse_graphql_error,
)


class TestParseGraphQLError:
    def test_not_found(self) -> None:
        shape = parse_graphql_error({"type": "NOT_FOUND", "message": "Could not resolve"})
        assert shape == GraphQLNotFound(message="Could not resolve")

    def test_rate_limited(self) -> None:
        assert isinstance(parse_graphql_error({"type": "RATE_LIMITED"}), GraphQLRateLimited)

    def test_message_with_unrecognised_type(self) -> None:
        shape = parse_graphql_error({"type": "FORBIDDEN", "message": "no access"})
        assert shape == GraphQLMessage(message="no access", type="FORBIDDEN")

    @pytest.mark.parametrize("raw", [{}, {"type": "WEIRD"}, {"message": ""}, "oops", None, {"message": 42}])
    def test_unknown_shapes(self, raw) -> None:
        assert isinstance(parse_graphql_error(raw), GraphQLUnknown)

    def test_first_error_shape_without_errors(self) -> None:
        assert first_error_shape({"data": {}}) is None
        assert first_error_shape({"data": {}, "errors": []}) is None

    def test_first_error_shape_with_non_list_errors(self) -> None:
        assert first_error_shape({"errors": {"message": "boom"}}) == GraphQLUnknown(raw={"message": "boom"})


class TestClassifyResponse:
    def test_identity_on_success(self) -> None:
        body = {"data": {"repository": {"stargazerCount": 1}}}
        assert classify_response(body) == body

    def test_empty_errors_field_is_dropped(self) -> None:
        body = {"data": {"repository": {"stargazerCount": 1}}, "errors": []}
        assert classify_response(body) == {"data": {"repository": {"stargazerCount": 1}}}

    def test_not_found(self) -> None:
        with pytest.raises(RepositoryNotFoundError) as exc_info:
            classify_response({"errors": [{"type": "NOT_FOUND"}]})
        assert exc_info.value.message == DEFAULT_NOT_FOUND_MESSAGE

    def test_not_found_keeps_api_message(self) -> None:
        body = {"errors": [{"type": "NOT_FOUND", "message": "Could not resolve to a Repository"}]}
        with pytest.raises(RepositoryNotFoundError, match="Could not resolve to a Repository"):
            classify_response(body)

    def test_message_becomes_graphql_error(self) -> None:
        body = {"errors": [{"message": "x"}]}
        with pytest.raises(GitHubGraphQLError) as exc_info:
            classify_response(body)
        assert exc_info.value.message == "x"
        assert exc_info.value.errors == body["errors"]

    def test_long_message_is_wrapped_to_one_line(self) -> None:
        message = "word " * 60
        with pytest.raises(GitHubGraphQLError) as exc_info:
            classify_response({"errors": [{"message": message}]})
        wrapped = exc_info.value.message
        assert wrapped.endswith("...")
        assert len(wrapped.removesuffix("...")) <= 90

    def test_message_is_html_encoded(self) -> None:
        with pytest.raises(GitHubGraphQLError) as exc_info:
            classify_response({"errors": [{"message": "bad <input>"}]})
        assert exc_info.value.message == "bad &#60;input&#62;"

    def test_unknown_shape_uses_default_message(self) -> None:
        with pytest.raises(GitHubGraphQLError) as exc_info:
            classify_response({"errors": [{"type": "SOMETHING"}]})
        assert exc_info.value.message == DEFAULT_GRAPHQL_MESSAGE

    def test_non_list_errors_is_a_graphql_error(self) -> None:
        with pytest.raises(GitHubGraphQLError) as exc_info:
            classify_response({"data": None, "errors": {"message": "boom"}})
        assert exc_info.value.message == DEFAULT_GRAPHQL_MESSAGE
        assert exc_info.value.errors == [{"message": "boom"}]

    def test_classified_errors_are_logged(self, recording_logger) -> None:
        with pytest.raises(RepositoryNotFoundError):
            classify_response({"errors": [{"type": "NOT_FOUND"}]}, recording_logger)

        assert recording_logger.events("error") == ["graphql_error_classified"]
        _, _, context = recording_logger.records[0]
        assert context["error_type"] == "REPOSITORY_NOT_FOUND"
        assert context["shape"] == "not_found"

    def test_success_is_not_logged(self, recording_logger) -> None:
        classify_response({"data": {}}, recording_logger)
        assert recording_logger.records == []

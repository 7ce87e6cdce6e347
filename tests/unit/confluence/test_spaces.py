"""Tests for the Confluence Spaces mixin."""


class TestSpacesMixin:
    def test_test_connection(self, confluence_fetcher, make_response):
        confluence_fetcher.confluence.request.return_value = make_response(
            200, {"results": []}
        )

        assert confluence_fetcher.test_connection() is True

        kwargs = confluence_fetcher.confluence.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["path"] == "rest/api/space"
        assert kwargs["params"] == {"limit": 1}

    def test_test_connection_unauthorized(self, confluence_fetcher, make_response):
        confluence_fetcher.confluence.request.return_value = make_response(
            401, text="Unauthorized"
        )

        assert confluence_fetcher.test_connection() is False

    def test_get_spaces(self, confluence_fetcher, make_response):
        confluence_fetcher.confluence.request.return_value = make_response(
            200,
            {
                "results": [
                    {
                        "id": 1,
                        "key": "DOCS",
                        "name": "Documentation",
                        "type": "global",
                        "description": {"plain": {"value": "Team docs"}},
                        "homepage": {"id": 42},
                    },
                    {"id": 2, "key": "~ann", "name": "Ann", "type": "personal"},
                ]
            },
        )

        spaces = confluence_fetcher.get_spaces(limit=10)

        params = confluence_fetcher.confluence.request.call_args.kwargs["params"]
        assert params == {"limit": 10, "expand": "description.plain,homepage"}
        assert [s.key for s in spaces] == ["DOCS", "~ann"]
        assert spaces[0].description == "Team docs"
        assert spaces[0].homepage_id == "42"
        assert spaces[1].type == "personal"

    def test_get_spaces_unexpected_body(self, confluence_fetcher, make_response):
        confluence_fetcher.confluence.request.return_value = make_response(200, [])

        assert confluence_fetcher.get_spaces() == []

from __future__ import annotations

import pytest


def test_classify_maps_known_statuses() -> None:
    from services.web.app.boundaries import CatchKind, classify

    assert classify(401) is CatchKind.UNAUTHORIZED
    assert classify(404) is CatchKind.NOT_FOUND
    assert classify(403) is CatchKind.OTHER
    assert classify(500) is CatchKind.OTHER


def test_not_found_renders_message_in_shell() -> None:
    from services.web.app.boundaries import CaughtResponse, render_catch_boundary

    html = render_catch_boundary(CaughtResponse(status=404, status_text="Not Found"))

    assert "<title>404 Not Found</title>" in html
    assert "404: Not Found" in html
    assert "does not exist" in html
    assert 'aria-label="Main navigation"' in html


def test_unauthorized_renders_message() -> None:
    from services.web.app.boundaries import CaughtResponse, render_catch_boundary

    html = render_catch_boundary(CaughtResponse(status=401, status_text="Unauthorized"))

    assert "401" in html
    assert "do not have access" in html
    assert "does not exist" not in html


def test_unmapped_status_escalates_with_data() -> None:
    from services.web.app.boundaries import CaughtResponse, UnhandledStatusError, render_catch_boundary

    with pytest.raises(UnhandledStatusError, match="database exploded") as exc_info:
        render_catch_boundary(CaughtResponse(status=500, status_text="Internal Server Error", data="database exploded"))
    assert exc_info.value.status_code == 500


def test_unmapped_status_escalates_with_status_text_when_no_data() -> None:
    from services.web.app.boundaries import CaughtResponse, UnhandledStatusError, render_catch_boundary

    with pytest.raises(UnhandledStatusError, match="Forbidden"):
        render_catch_boundary(CaughtResponse(status=403, status_text="Forbidden"))


def test_caught_response_drops_default_detail() -> None:
    from services.web.app.boundaries import CaughtResponse

    assert CaughtResponse.from_http_exception(404, "Not Found") == CaughtResponse(404, "Not Found", None)
    assert CaughtResponse.from_http_exception(500, "kaput") == CaughtResponse(500, "Internal Server Error", "kaput")


def test_error_boundary_renders_error_message() -> None:
    from services.web.app.boundaries import render_error_boundary

    html = render_error_boundary(ValueError("no skills <here>"))

    assert "<title>Error!</title>" in html
    assert "There was an error" in html
    assert "no skills &lt;here&gt;" in html

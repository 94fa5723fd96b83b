"""Unit tests for layout composition."""

import pytest

from fastapi_view.layout import with_layout


@pytest.mark.asyncio
async def test_without_layout_returns_render_unchanged():
    """Test no wrapper is built when there is no layout."""

    async def render(page, data, **kwargs):
        return page

    assert with_layout(render, None) is render
    assert with_layout(render, "") is render


@pytest.mark.asyncio
async def test_layout_receives_body_and_data():
    """Test the page is rendered first and handed to the layout as body."""
    calls = []

    async def render(page, data, **kwargs):
        calls.append((page, dict(data), kwargs))
        if page == "layout":
            return f"[{data['title']}|{data['body']}]"
        return f"<p>{data['title']}</p>"

    wrapped = with_layout(render, "layout")
    html = await wrapped("index", {"title": "T"}, partials={"p": "p.hbs"}, requested_path="/")

    assert html == "[T|<p>T</p>]"
    assert calls[0] == ("index", {"title": "T"}, {"partials": {"p": "p.hbs"}, "requested_path": "/"})
    assert calls[1][0] == "layout"
    assert calls[1][1] == {"title": "T", "body": "<p>T</p>"}


@pytest.mark.asyncio
async def test_page_errors_skip_the_layout():
    """Test a failing page render never reaches the layout."""
    calls = []

    async def render(page, data, **kwargs):
        calls.append(page)
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await with_layout(render, "layout")("index", {})

    assert calls == ["index"]

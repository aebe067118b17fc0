"""End-to-end server tests."""

import pytest
import json

from jsoutline_mcp.server import server, list_tools, call_tool, env_flag


@pytest.mark.asyncio
async def test_server_lists_three_tools():
    """Test that server lists all 3 tools."""
    tools = await list_tools()

    assert len(tools) == 3

    names = {t.name for t in tools}
    expected = {"get_source_outline", "get_file_outline", "get_folder_outline"}
    assert names == expected


@pytest.mark.asyncio
async def test_outline_tool_schema():
    """Test that every tool exposes the outline options."""
    tools = await list_tools()

    for tool in tools:
        props = tool.inputSchema["properties"]
        assert "show_arguments" in props
        assert "show_unnamed" in props
        assert "sort_alphabetically" in props
        assert "nested" in props

    source = next(t for t in tools if t.name == "get_source_outline")
    assert source.inputSchema["required"] == ["content"]


@pytest.mark.asyncio
async def test_call_get_source_outline():
    """Test calling the source outline tool."""
    result = await call_tool("get_source_outline", {
        "content": "var b = function (x) {};\nfunction a() {}\n",
        "sort_alphabetically": True,
    })
    data = json.loads(result[0].text)

    assert [e["name"] for e in data["entries"]] == ["a", "b"]
    assert data["entries"][1]["signature"] == "(x)"


@pytest.mark.asyncio
async def test_call_uses_environment_defaults(monkeypatch):
    """Test that environment settings apply when arguments are omitted."""
    monkeypatch.setenv("JSOUTLINE_SHOW_ARGUMENTS", "false")
    monkeypatch.setenv("JSOUTLINE_SHOW_UNNAMED", "no")

    result = await call_tool("get_source_outline", {
        "content": "function f(a) {}\nsetTimeout(function () {}, 0);\n",
    })
    data = json.loads(result[0].text)

    assert data["entry_count"] == 1
    assert data["entries"][0]["signature"] == ""


@pytest.mark.asyncio
async def test_call_unknown_tool():
    """Test that unknown tools return an error."""
    result = await call_tool("index_repo", {})
    data = json.loads(result[0].text)
    assert "Unknown tool" in data["error"]


@pytest.mark.asyncio
async def test_call_missing_argument():
    """Test that a missing required argument is reported, not raised."""
    result = await call_tool("get_file_outline", {})
    data = json.loads(result[0].text)
    assert "error" in data


def test_env_flag(monkeypatch):
    """Test boolean environment parsing."""
    monkeypatch.delenv("JSOUTLINE_TEST_FLAG", raising=False)
    assert env_flag("JSOUTLINE_TEST_FLAG", True) is True

    monkeypatch.setenv("JSOUTLINE_TEST_FLAG", " Yes ")
    assert env_flag("JSOUTLINE_TEST_FLAG", False) is True

    monkeypatch.setenv("JSOUTLINE_TEST_FLAG", "off")
    assert env_flag("JSOUTLINE_TEST_FLAG", True) is False

    monkeypatch.setenv("JSOUTLINE_TEST_FLAG", "maybe")
    assert env_flag("JSOUTLINE_TEST_FLAG", False) is False

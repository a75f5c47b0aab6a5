"""Checkpoint: Verify the actions are exposed as LangChain tools."""
from core.tools_bridge import get_all_tools


def test_all_tools_have_names():
    tools = get_all_tools()
    assert [t.name for t in tools] == ["transfer", "balance", "confirm"]


def test_tools_have_descriptions():
    for tool in get_all_tools():
        assert tool.description, f"Tool {tool.name} missing description"
        assert len(tool.description) > 10, f"Tool {tool.name} description too short"


def test_transfer_tool_execution():
    transfer = get_all_tools()[0]
    result = transfer.invoke({"message": "transfer 10 SEI to sei1abc123"})
    assert "• Amount: 10 SEI (~$4.20)" in result


def test_balance_tool_execution():
    balance = get_all_tools()[1]
    assert "$3,125.80" in balance.invoke({"message": "balance"})

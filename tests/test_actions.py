"""Behavior of the three shipped SEI Mate actions."""
import re

import pytest
from skills.registry import registry

FORMAT_HINT = "Please use format: 'transfer 10 SEI to sei1abc123...'"

BALANCE_LINES = [
    "💰 **Wallet Balance**",
    "🔗 **Address:** sei1demo123...",
    "• SEI: 125.50 (~$52.71)",
    "• USDC: 2,450.75",
    "• WETH: 0.0125 (~$31.25)",
    "📊 **Total:** $3,125.80",
]

@pytest.fixture
def transfer():
    return registry.get("TRANSFER")

@pytest.fixture
def balance():
    return registry.get("BALANCE")

@pytest.fixture
def confirm():
    return registry.get("CONFIRM")

# --- Transfer ---

@pytest.mark.parametrize("text, expected", [
    ("transfer 10 SEI to sei1abc123", True),
    ("SEND 2 sei to sei1abc", True),
    ("please Transfer my tokens", True),
    ("check balance", False),
    ("yes", False),
])
def test_transfer_predicate(transfer, text, expected):
    assert transfer.validate(text) is expected

def test_transfer_confirmation(transfer):
    result = transfer.handler("transfer 10 SEI to sei1abc123")
    assert result.is_ok
    assert result.content == {
        "success": True,
        "amount": "10",
        "address": "sei1abc123",
        "estimated_usd": "4.20",
        "status": "pending_confirmation",
    }
    assert result.text == (
        "🔄 **Transfer Confirmation**\n\n"
        "💸 **Details:**\n"
        "• Amount: 10 SEI (~$4.20)\n"
        "• To: sei1abc123\n"
        "• Network: SEI Mainnet\n"
        "• Gas: ~0.001 SEI\n\n"
        "⚠️ Confirm with \"yes\" to proceed."
    )

@pytest.mark.parametrize("text, amount, address, usd", [
    ("send 2.5 SEI to sei1xyz", "2.5", "sei1xyz", "1.05"),
    ("Transfer 100 sei TO Sei1ABC", "100", "Sei1ABC", "42.00"),
    ("send 0.01 to sei1q", "0.01", "sei1q", "0.00"),
    ("transfer 7 SEI to sei1abc then 3 more", "7", "sei1abc", "2.94"),
    ("transfer 10SEI to sei1abc123", "10", "sei1abc123", "4.20"),
])
def test_transfer_extraction(transfer, text, amount, address, usd):
    result = transfer.handler(text)
    assert result.content["amount"] == amount
    assert result.content["address"] == address
    assert result.content["estimated_usd"] == usd == f"{float(amount) * 0.42:.2f}"
    assert f"• Amount: {amount} SEI (~${usd})" in result.text
    assert f"• To: {address}" in result.text

@pytest.mark.parametrize("text", [
    "transfer SEI to sei1abc123",
    "send 10 SEI",
    "transfer 10 SEI to",
    "send money",
    "send 5 SEI into sei1x",
])
def test_transfer_invalid_format(transfer, text):
    result = transfer.handler(text)
    assert not result.is_ok
    assert result.kind == "invalid_format"
    assert result.text == FORMAT_HINT
    assert result.content["error"] == "invalid_format"
    assert "Transfer Confirmation" not in result.text

# --- Balance ---

@pytest.mark.parametrize("text", ["balance", "What's my BALANCE?", "open wallet", "Wallet 123 to sei1abc"])
def test_balance_predicate(balance, text):
    assert balance.validate(text)

def test_balance_predicate_rejects(balance):
    assert not balance.validate("transfer 10 SEI to sei1abc")

@pytest.mark.parametrize("text", ["check balance", "wallet of sei1other", ""])
def test_balance_is_fixed(balance, text):
    result = balance.handler(text)
    assert result.is_ok
    for line in BALANCE_LINES:
        assert line in result.text
    assert result.content == {
        "success": True,
        "balances": {"SEI": "125.50", "USDC": "2,450.75", "WETH": "0.0125"},
    }

# --- Confirm ---

@pytest.mark.parametrize("text", ["yes", "YES", "Confirm", "proceed", "PrOcEeD"])
def test_confirm_predicate_accepts(confirm, text):
    assert confirm.validate(text)

@pytest.mark.parametrize("text", ["yes please", "confirmed", "ok", "I confirm", "no", " yes ", "yes\n", "\tproceed"])
def test_confirm_predicate_rejects(confirm, text):
    assert not confirm.validate(text)

def test_confirm_success(confirm):
    result = confirm.handler("yes")
    assert result.is_ok
    assert result.content["status"] == "completed"
    assert result.content["success"] is True
    assert re.fullmatch(r"0x[0-9a-f]{40}", result.content["tx_hash"])
    assert f"• Transaction Hash: {result.content['tx_hash']}" in result.text
    assert result.text.startswith("✅ **Transfer Completed!**")

def test_confirm_without_prior_transfer(confirm):
    """Confirming with nothing pending still succeeds (no cross-turn state)."""
    first = confirm.handler("confirm")
    second = confirm.handler("confirm")
    assert first.is_ok and second.is_ok
    assert first.content["tx_hash"] != second.content["tx_hash"]

from core.result import ActionResponse, ActionResult, Ok

ACTION = "BALANCE"

DEMO_BALANCES = {
    "SEI": "125.50",
    "USDC": "2,450.75",
    "WETH": "0.0125",
}

BALANCE_TEXT = """💰 **Wallet Balance**

🔗 **Address:** sei1demo123...

💎 **Tokens:**
• SEI: 125.50 (~$52.71)
• USDC: 2,450.75
• WETH: 0.0125 (~$31.25)

📊 **Total:** $3,125.80

🎯 **Actions:**
• "transfer 10 SEI to [address]"
• "swap 5 SEI to USDC\""""

EXAMPLES = [
    [
        {"user": "{{user1}}", "content": {"text": "check balance"}},
        {"user": "SEI Mate", "content": {"text": BALANCE_TEXT}},
    ]
]


def validate(text: str) -> bool:
    lowered = text.lower()
    return "balance" in lowered or "wallet" in lowered


def execute(text: str) -> ActionResult:
    """Returns the demo wallet balance. The message content is ignored."""
    return Ok(
        action=ACTION,
        response=ActionResponse(
            text=BALANCE_TEXT,
            content={"success": True, "balances": dict(DEMO_BALANCES)},
        ),
    )

if __name__ == "__main__":
    print(execute("").text)

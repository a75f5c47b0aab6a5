import re

from core.result import ActionResponse, ActionResult, Err, Ok

ACTION = "TRANSFER"
SEI_USD_PRICE = 0.42
FORMAT_HINT = "Please use format: 'transfer 10 SEI to sei1abc123...'"

# A number must not follow a letter or digit, so "sei1abc123" holds no amount
# while "10SEI" still reads as 10.
AMOUNT_PATTERN = re.compile(r"(?<![A-Za-z0-9])(\d+(?:\.\d+)?)")
ADDRESS_PATTERN = re.compile(r"\bto\s+([a-zA-Z0-9]+)", re.IGNORECASE)

CONFIRMATION_TEMPLATE = """🔄 **Transfer Confirmation**

💸 **Details:**
• Amount: {amount} SEI (~${usd})
• To: {address}
• Network: SEI Mainnet
• Gas: ~0.001 SEI

⚠️ Confirm with "yes" to proceed."""

EXAMPLES = [
    [
        {"user": "{{user1}}", "content": {"text": "transfer 10 SEI to sei1abc123"}},
        {"user": "SEI Mate", "content": {"text": CONFIRMATION_TEMPLATE.format(amount="10", usd="4.20", address="sei1abc123")}},
    ]
]


def validate(text: str) -> bool:
    lowered = text.lower()
    return "transfer" in lowered or "send" in lowered


def estimate_usd(amount: str) -> str:
    """Placeholder USD value of `amount` SEI, two decimals."""
    return f"{float(amount) * SEI_USD_PRICE:.2f}"


def execute(text: str) -> ActionResult:
    """Builds the confirmation request for a transfer message."""
    amount_match = AMOUNT_PATTERN.search(text)
    address_match = ADDRESS_PATTERN.search(text)

    if not amount_match or not address_match:
        return Err(action=ACTION, kind="invalid_format", message=FORMAT_HINT)

    amount = amount_match.group(1)
    address = address_match.group(1)
    usd = estimate_usd(amount)

    return Ok(
        action=ACTION,
        response=ActionResponse(
            text=CONFIRMATION_TEMPLATE.format(amount=amount, usd=usd, address=address),
            content={
                "success": True,
                "amount": amount,
                "address": address,
                "estimated_usd": usd,
                "status": "pending_confirmation",
            },
        ),
    )

if __name__ == "__main__":
    import sys
    if len(sys.argv) > 1:
        print(execute(" ".join(sys.argv[1:])).text)
    else:
        print("Usage: python main.py <message>")

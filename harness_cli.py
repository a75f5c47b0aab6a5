from typing import Any, Dict

import requests

from config import cfg

def format_reply(data: Dict[str, Any]) -> str:
    """Renders a /chat/text reply, marking format hints and failures."""
    speech = data.get("speech", "No response.")
    if data.get("status") != "error":
        return f"SEI Mate: {speech}"

    kind = data.get("kind")
    if kind == "invalid_format":
        return f"SEI Mate (hint): {speech}"
    if kind == "no_match":
        return f"SEI Mate (no action): {speech}"
    return f"SEI Mate [{kind or 'error'}]: {speech}"

def run_harness(server_url: str = None):
    server_url = server_url or f"http://127.0.0.1:{cfg().port}/chat/text"

    print("\n" + "="*50)
    print("💬 SEI MATE TEXT HARNESS")
    print("Try 'check balance' or 'transfer 10 SEI to sei1abc123', then 'yes'.")
    print("Type 'exit' to quit.")
    print("="*50 + "\n")

    while True:
        try:
            user_input = input("You: ").strip()

            if user_input.lower() in ["exit", "quit"]:
                break

            if not user_input:
                continue

            response = requests.post(server_url, json={"text": user_input}, timeout=10)

            if response.status_code != 200:
                print(f"\n[ERROR] Server returned {response.status_code}: {response.text}")
                continue

            data = response.json()
            print(f"\n{format_reply(data)}")
            if data.get("status") == "ok" and data.get("content", {}).get("status") == "pending_confirmation":
                print("(reply 'yes' to confirm)")
            print()

        except KeyboardInterrupt:
            break
        except requests.RequestException as e:
            print(f"\n[ERROR] Failed to connect to agent: {e}")
            break

if __name__ == "__main__":
    run_harness()

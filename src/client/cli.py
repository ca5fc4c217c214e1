"""Command-line client for the online time server."""

from __future__ import annotations

import argparse
import json

import httpx


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ask the MCP time server for the current time")
    parser.add_argument("--server-url", default="http://localhost:3000", help="Time server base URL")
    parser.add_argument("--timeout", type=float, default=10.0, help="Request timeout seconds")
    parser.add_argument("--health", action="store_true", help="Query /health instead of /time")
    parser.add_argument("--verbose", action="store_true", help="Print the raw JSON payload")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    path = "/health" if args.health else "/time"
    url = f"{args.server_url.rstrip('/')}{path}"

    # Avoid inheriting system proxy settings that can break localhost calls.
    try:
        with httpx.Client(timeout=args.timeout, trust_env=False) as client:
            resp = client.get(url)
    except httpx.TimeoutException:
        print("Request timed out. Try again with a longer timeout, e.g. --timeout 30")
        return 1
    except httpx.RequestError as exc:
        print(f"Request failed: {exc}")
        return 1
    if resp.status_code >= 400:
        print(f"Request failed: {resp.status_code}")
        print(resp.text)
        return 1

    data = resp.json()
    if args.health:
        print(data.get("status", ""))
    elif data.get("success"):
        print(data["data"]["content"][0]["text"])
    else:
        print(data.get("error", "Unknown error"))
        return 1

    if args.verbose:
        print("\n--- payload ---")
        print(json.dumps(data, ensure_ascii=False, indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

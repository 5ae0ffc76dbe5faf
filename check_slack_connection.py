#!/usr/bin/env python3
"""
Check Slack API Connection
This script verifies that the configured token can reach the Slack Web API
"""

import asyncio
import json
import sys


def mask(value: str) -> str:
    return f"{value[:10]}...{value[-5:]}" if len(value) > 15 else "***"


def show(label: str, body) -> bool:
    if isinstance(body, bytes):
        print(f"⚠️  {label} returned a non-JSON body ({len(body)} bytes)")
        return False
    print(f"{label}: {json.dumps(body, indent=2, sort_keys=True)}")
    return bool(body.get("ok"))


async def check_slack_connection() -> bool:
    """Call api.test and auth.test with the configured settings"""
    from slack_puncher.config import settings
    from slack_puncher.logging_config import configure_logging
    from slack_puncher.services.slack import SlackClient, TransportError

    configure_logging(settings)

    print("=" * 60)
    print("Testing Slack Web API Connection")
    print("=" * 60)
    print()
    print(f"Endpoint:   {settings.base_url}")
    print(f"User-Agent: {settings.slack_user_agent}")

    if not settings.slack_api_token:
        print("❌ SLACK_API_TOKEN is not set")
        print("   Please set your environment variables first.")
        return False

    print(f"✅ Token: {mask(settings.slack_api_token)}")
    print()

    async with SlackClient(settings) as client:
        try:
            print("🔄 Calling api.test ...")
            api_ok = show("api.test", await client.api.test())
            print()
            print("🔄 Calling auth.test ...")
            auth_ok = show("auth.test", await client.auth.test())
        except TransportError as exc:
            print(f"❌ Could not reach Slack: {exc}")
            return False

    print()
    print("=" * 60)
    if api_ok and auth_ok:
        print("🎉 Token is valid and Slack is reachable!")
    else:
        print("❌ Slack answered with an error, see the response above")
    print("=" * 60)
    return api_ok and auth_ok


def main():
    try:
        result = asyncio.run(check_slack_connection())
        return 0 if result else 1
    except KeyboardInterrupt:
        print("\n\n⚠️  Check interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())

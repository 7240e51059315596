#!/usr/bin/env python3
"""
Demo Script for the Hub Client

This script walks through the hub API end-to-end against a live server,
using two simulated users (an owner and a member, each identified by a
fresh random token).

Usage:
    python -m hubclient.demo
    python -m hubclient.demo --base-url http://127.0.0.1:8080/api
    python -m hubclient.demo --demo moderation
"""

import argparse
import asyncio
import logging

from .config import ClientConfig, new_auth_token
from .errors import HubClientError, RemoteError
from .schemas import ChannelPermission, ChannelUpdate, HubPermission, HubUpdate
from .service import HubClient

logger = logging.getLogger(__name__)


def _banner(title: str) -> None:
    logger.info("=" * 60)
    logger.info(title)
    logger.info("=" * 60)


async def _expect_rejected(description: str, call) -> None:
    """Await a call the server is expected to refuse."""
    try:
        result = await call
    except RemoteError as e:
        logger.info(f"  {description}: rejected as expected ({e.message})")
    else:
        logger.warning(f"  {description}: unexpectedly succeeded ({result!r})")


async def demo_hub(owner: HubClient) -> None:
    """
    Demonstrate the hub and channel lifecycle.

    This function shows:
    1. Creating, reading and renaming a hub
    2. Creating, reading and renaming a channel
    3. Deleting the channel and the hub
    """
    _banner("Hub Client Demo - Hubs and Channels")

    hub_id = await owner.create_hub("test0", "Demo hub")
    try:
        hub = await owner.get_hub(hub_id)
        logger.info(
            f"  Created hub '{hub.name}' ({hub.id}) owned by {hub.owner}"
        )

        await owner.update_hub(hub_id, HubUpdate(name="test1"))
        hub = await owner.get_hub(hub_id)
        logger.info(f"  Renamed hub to '{hub.name}'")

        channel_id = await owner.create_channel(
            hub_id, "general", "Demo channel"
        )
        channel = await owner.get_channel(hub_id, channel_id)
        logger.info(f"  Created channel '{channel.name}' ({channel.id})")

        await owner.update_channel(
            hub_id, channel_id, ChannelUpdate(description="Renamed in demo")
        )
        channel = await owner.get_channel(hub_id, channel_id)
        logger.info(f"  Channel description is now '{channel.description}'")

        await owner.delete_channel(hub_id, channel_id)
        await _expect_rejected(
            "Reading deleted channel", owner.get_channel(hub_id, channel_id)
        )
    finally:
        await owner.delete_hub(hub_id)

    await _expect_rejected("Reading deleted hub", owner.get_hub(hub_id))


async def demo_messages(owner: HubClient, member: HubClient) -> None:
    """
    Demonstrate membership, permissions and messaging.
    """
    _banner("Hub Client Demo - Members and Messages")

    hub_id = await owner.create_hub("messages", "Demo hub")
    try:
        channel_id = await owner.create_channel(hub_id, "general")

        await member.join_hub(hub_id)
        joined = await member.get_member(hub_id, member.auth)
        logger.info(f"  Member {joined.user_id} joined at {joined.joined}")

        setting = await owner.get_member_hub_permission(
            hub_id, member.auth, HubPermission.WRITE_CHANNELS
        )
        logger.info(f"  WRITE_CHANNELS before override: {setting.name}")
        await owner.set_member_hub_permission(
            hub_id, member.auth, HubPermission.WRITE_CHANNELS, True
        )
        setting = await owner.get_member_hub_permission(
            hub_id, member.auth, HubPermission.WRITE_CHANNELS
        )
        logger.info(f"  WRITE_CHANNELS after override: {setting.name}")

        await owner.set_member_channel_permission(
            hub_id, member.auth, channel_id, ChannelPermission.WRITE, True
        )

        first_id = await member.send_message(hub_id, channel_id, "Hello world!")
        await member.send_message(hub_id, channel_id, "Second message")
        message = await member.get_message(hub_id, channel_id, first_id)
        logger.info(f"  Sent message {message.id}: '{message.content}'")

        after = await owner.get_messages_after(hub_id, channel_id, first_id, 10)
        logger.info(f"  {len(after)} message(s) after the first one")

        await member.leave_hub(hub_id)
    finally:
        await owner.delete_hub(hub_id)


async def demo_moderation(owner: HubClient, member: HubClient) -> None:
    """
    Demonstrate mute, unmute, kick and ban.
    """
    _banner("Hub Client Demo - Moderation")

    hub_id = await owner.create_hub("moderation", "Demo hub")
    try:
        channel_id = await owner.create_channel(hub_id, "general")
        await member.join_hub(hub_id)

        await owner.mute_member(hub_id, member.auth)
        status = await owner.get_member_status(hub_id, member.auth)
        logger.info(f"  Muted: {status.muted}")
        await _expect_rejected(
            "Sending while muted",
            member.send_message(hub_id, channel_id, "Can anyone hear me?"),
        )

        await owner.unmute_member(hub_id, member.auth)
        message_id = await member.send_message(hub_id, channel_id, "I'm back")
        logger.info(f"  Sent message {message_id} after unmute")

        await owner.kick_member(hub_id, member.auth)
        await member.join_hub(hub_id)
        logger.info("  Rejoined after kick")

        await owner.ban_member(hub_id, member.auth)
        await _expect_rejected(
            "Reading hub while banned", member.get_hub(hub_id)
        )
        await _expect_rejected(
            "Joining hub while banned", member.join_hub(hub_id)
        )

        await owner.unban_member(hub_id, member.auth)
    finally:
        await owner.delete_hub(hub_id)


async def run_demo(base_url: str, demo: str) -> None:
    """Run the selected demo with a fresh owner and member."""
    owner = HubClient.from_config(ClientConfig.from_env(base_url=base_url))
    member = HubClient(owner.base_url, new_auth_token())

    if demo in ("full", "hub"):
        await demo_hub(owner)
    if demo in ("full", "messages"):
        await demo_messages(owner, member)
    if demo in ("full", "moderation"):
        await demo_moderation(owner, member)

    _banner("Demo completed successfully!")


def main():
    """Main entry point for the demo script."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Exercise the hub API against a live server"
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Base URL of the hub API (defaults to $HUB_BASE_URL)",
    )
    parser.add_argument(
        "--demo",
        choices=["full", "hub", "messages", "moderation"],
        default="full",
        help="Which demo to run",
    )

    args = parser.parse_args()

    try:
        asyncio.run(run_demo(args.base_url, args.demo))
    except HubClientError as e:
        logger.error(f"Demo failed: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()

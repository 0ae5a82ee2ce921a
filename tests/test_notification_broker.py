"""Tests for the in-process notification change broker."""

from __future__ import annotations

import asyncio
import threading

import pytest

from complaint_desk.infrastructure.notifications import NotificationChangeBroker


@pytest.mark.anyio
async def test_publish_signals_only_listeners_of_the_user() -> None:
    broker = NotificationChangeBroker()
    mine = broker.listen("u1")
    theirs = broker.listen("u2")

    broker.publish("u1")
    await asyncio.sleep(0)

    assert mine.qsize() == 1
    assert theirs.empty()


@pytest.mark.anyio
async def test_publish_from_worker_thread_reaches_the_loop() -> None:
    broker = NotificationChangeBroker()
    queue = broker.listen("u1")

    thread = threading.Thread(target=broker.publish, args=("u1",))
    thread.start()
    thread.join()

    await asyncio.wait_for(queue.get(), timeout=1)


@pytest.mark.anyio
async def test_forget_removes_the_listener() -> None:
    broker = NotificationChangeBroker()
    queue = broker.listen("u1")

    broker.forget("u1", queue)
    broker.publish("u1")
    await asyncio.sleep(0)

    assert broker.listener_count("u1") == 0
    assert queue.empty()

"""
Notification service for the volunteer matching platform.

This module provides the in-process notice bus used to push notices to
connected clients, and the persistence of notices for assignments.
"""

import queue
from collections import defaultdict
from datetime import datetime, time, timezone
from threading import Lock
from typing import Any, Dict, List

from flask import current_app
from volunteer_match import db, get_bus
from volunteer_match.models import Notice
from volunteer_match.services.dto import to_notice_payload

# Marker put on subscriber queues when the bus shuts down
END_OF_STREAM = None


def notice_channel(volunteer_id) -> str:
    """Channel key carrying notices for one volunteer."""
    return f'notice:{volunteer_id}'


def utc_midnight_iso(day) -> str:
    """Midnight UTC of a calendar date as an ISO-8601 timestamp, e.g. ``2025-11-08T00:00:00.000Z``."""
    return datetime.combine(day, time(), tzinfo=timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.000Z')


class NotificationBus:
    """Publish/subscribe registry keyed by channel name.

    Publishing is fire-and-forget: payloads for channels with no subscriber
    are dropped, and each subscriber receives payloads in publish order.
    """

    def __init__(self):
        self._subscribers: Dict[str, List[queue.Queue]] = defaultdict(list)
        self._lock = Lock()
        self._closed = False

    def subscribe(self, channel: str) -> queue.Queue:
        """
        Subscribe to a channel.

        Args:
            channel: The channel key to subscribe to.

        Returns:
            Queue receiving every payload published on the channel.
        """
        subscriber = queue.Queue()
        with self._lock:
            if self._closed:
                subscriber.put_nowait(END_OF_STREAM)
            else:
                self._subscribers[channel].append(subscriber)
        return subscriber

    def unsubscribe(self, channel: str, subscriber: queue.Queue):
        """Remove a subscriber queue from a channel."""
        with self._lock:
            subscribers = self._subscribers.get(channel)
            if not subscribers:
                return
            if subscriber in subscribers:
                subscribers.remove(subscriber)
            if not subscribers:
                del self._subscribers[channel]

    def publish(self, channel: str, payload: Dict[str, Any]) -> int:
        """
        Publish a payload to all current subscribers of a channel.

        Args:
            channel: The channel key.
            payload: JSON-serializable payload.

        Returns:
            Number of subscribers the payload was delivered to.
        """
        with self._lock:
            subscribers = list(self._subscribers.get(channel, ()))
        for subscriber in subscribers:
            subscriber.put_nowait(payload)
        return len(subscribers)

    def subscriber_count(self, channel: str) -> int:
        with self._lock:
            return len(self._subscribers.get(channel, ()))

    def close(self):
        """Wake every subscriber with an end-of-stream marker and clear the registry."""
        with self._lock:
            self._closed = True
            subscribers = [s for channel in self._subscribers.values() for s in channel]
            self._subscribers.clear()
        for subscriber in subscribers:
            subscriber.put_nowait(END_OF_STREAM)


class NotificationService:
    """Service class for notice management."""

    @staticmethod
    def notify_volunteer_assignment(volunteer, event):
        """
        Record a success notice for a new assignment and push it to live clients.

        Args:
            volunteer: The assigned VolunteerProfile
            event: The EventDetails the volunteer was assigned to

        Returns:
            Tuple of (Notice, number of clients the notice reached)
        """
        notice = Notice(
            volunteer_id=volunteer.user_id,
            title=f'Assigned: {event.event_name}',
            body=f'{event.location} • {utc_midnight_iso(event.event_date)}',
            type='success'
        )
        db.session.add(notice)
        db.session.commit()

        delivered = get_bus(current_app).publish(
            notice_channel(volunteer.user_id), to_notice_payload(notice)
        )
        current_app.logger.debug(
            f"Notice {notice.id} delivered to {delivered} client(s) of volunteer {volunteer.user_id}"
        )
        return notice, delivered

    @staticmethod
    def get_volunteer_notices(volunteer_id, limit=None):
        """Get persisted notices for a volunteer as payloads, newest first."""
        return [to_notice_payload(n) for n in Notice.get_for_volunteer(volunteer_id, limit)]

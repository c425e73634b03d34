from __future__ import annotations

from typing import Callable


class Subscription:
    """Handle returned by every registration; releasing it twice is harmless."""

    def __init__(self, release: Callable[[], None]) -> None:
        self._release: Callable[[], None] | None = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def unsubscribe(self) -> None:
        release, self._release = self._release, None
        if release is not None:
            release()


class SubscriptionSet:
    """Groups handles so an owner can drop all of them at once."""

    def __init__(self) -> None:
        self._items: list[Subscription] = []

    def add(self, subscription: Subscription) -> Subscription:
        self._items.append(subscription)
        return subscription

    def __len__(self) -> int:
        return sum(1 for s in self._items if s.active)

    def release_all(self) -> None:
        items, self._items = self._items, []
        for subscription in items:
            subscription.unsubscribe()

"""Abstract contract for owner notifications."""

from abc import ABC, abstractmethod


class NotificationSink(ABC):
    """Delivers events to an owner's notification inbox."""

    @abstractmethod
    def notify(
        self,
        *,
        target_owner: int,
        event_kind: str,
        actor: int,
        subject_id: int,
    ) -> None:
        """Record one notification for ``target_owner``.

        Raises:
            NotificationDeliveryError: If the notification cannot be stored
        """

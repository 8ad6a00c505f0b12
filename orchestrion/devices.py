"""Device identifiers, change notifications and the device service interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class ExternalDeviceId:
    """Identifier of an external device; compares equal to its string value."""

    value: str

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExternalDeviceId):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass
class DeviceDesc:
    """A device's identifier together with its human-readable name."""

    id: str
    name: str


class Notification:
    """A signal without payload that calls its subscribers in order."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        """Remove a subscriber; raises ValueError if it was not subscribed."""
        self._callbacks.remove(callback)

    def notify(self) -> None:
        for callback in list(self._callbacks):
            callback()


@contextmanager
def scoped_true(obj: object, attribute: str) -> Iterator[None]:
    """Set ``obj.attribute`` to True for the duration of the block, then False."""
    setattr(obj, attribute, True)
    try:
        yield
    finally:
        setattr(obj, attribute, False)


class ExternalDeviceService(ABC):
    """Common interface of the audio and MIDI device services."""

    @abstractmethod
    def available_devices(self) -> list[ExternalDeviceId]:
        """Identifiers of the devices currently available."""

    @property
    @abstractmethod
    def available_devices_changed(self) -> Notification:
        """Fires when the set of available devices changes."""

    @abstractmethod
    def is_available(self, device_id: ExternalDeviceId) -> bool:
        """Whether the device is currently available."""

    @abstractmethod
    def is_no_device(self, device_id: ExternalDeviceId) -> bool:
        """Whether the identifier stands for 'no device'."""

    @abstractmethod
    def select_device(self, device_id: ExternalDeviceId | None) -> None:
        """Select a device; it does not have to be available."""

    @property
    @abstractmethod
    def selected_device_changed(self) -> Notification:
        """Fires when the selected device changes."""

    @abstractmethod
    def selected_device(self) -> ExternalDeviceId | None:
        """The device currently selected, if any."""

    @abstractmethod
    def select_default_device(self) -> None:
        """Select the service's default device."""

    @abstractmethod
    def device_name(self, device_id: ExternalDeviceId) -> str:
        """Human-readable name of the device, or an empty string."""
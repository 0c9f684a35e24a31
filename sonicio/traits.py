"""Abstract interfaces shared by every audio host, device and stream."""

from __future__ import annotations

import abc
from typing import Any, Callable, Iterable, Iterator, Optional

from sonicio.config import StreamConfig, SupportedStreamConfig, SupportedStreamConfigRange
from sonicio.data import Data
from sonicio.sample_format import SampleFormat
from sonicio.timing import InputCallbackInfo, OutputCallbackInfo

InputDataCallback = Callable[[Data, InputCallbackInfo], None]
OutputDataCallback = Callable[[Data, OutputCallbackInfo], None]
ErrorCallback = Callable[[Exception], None]


class StreamTrait(abc.ABC):
    """An open flow of audio data that can be started and paused."""

    @abc.abstractmethod
    def play(self) -> None:
        """Run the stream.

        Not every host starts a stream when it is built, so call this after
        building a stream that should run at once.
        """

    @abc.abstractmethod
    def pause(self) -> None:
        """Pause the stream; devices that cannot suspend raise an error."""


class DeviceTrait(abc.ABC):
    """A device capable of audio input, output or both.

    Devices may become invalid when disconnected, so the query methods may raise.
    """

    @abc.abstractmethod
    def name(self) -> str:
        """The human-readable name of the device."""

    def supports_input(self) -> bool:
        """True if the device offers at least one input configuration."""
        return _has_any(self.supported_input_configs)

    def supports_output(self) -> bool:
        """True if the device offers at least one output configuration."""
        return _has_any(self.supported_output_configs)

    @abc.abstractmethod
    def supported_input_configs(self) -> Iterable[SupportedStreamConfigRange]:
        """The input configuration ranges the device supports."""

    @abc.abstractmethod
    def supported_output_configs(self) -> Iterable[SupportedStreamConfigRange]:
        """The output configuration ranges the device supports."""

    @abc.abstractmethod
    def default_input_config(self) -> SupportedStreamConfig:
        """The default input configuration of the device."""

    @abc.abstractmethod
    def default_output_config(self) -> SupportedStreamConfig:
        """The default output configuration of the device."""

    def build_input_stream(
        self,
        config: StreamConfig,
        sample_format: SampleFormat,
        data_callback: Callable[[memoryview, InputCallbackInfo], None],
        error_callback: ErrorCallback,
        timeout: Optional[float] = None,
    ) -> StreamTrait:
        """Create an input stream whose callback receives typed sample views."""

        def on_data(data: Data, info: InputCallbackInfo) -> None:
            data_callback(_typed_view(data, sample_format), info)

        return self.build_input_stream_raw(
            config, sample_format, on_data, error_callback, timeout
        )

    def build_output_stream(
        self,
        config: StreamConfig,
        sample_format: SampleFormat,
        data_callback: Callable[[memoryview, OutputCallbackInfo], None],
        error_callback: ErrorCallback,
        timeout: Optional[float] = None,
    ) -> StreamTrait:
        """Create an output stream whose callback fills typed sample views."""

        def on_data(data: Data, info: OutputCallbackInfo) -> None:
            data_callback(_typed_view(data, sample_format), info)

        return self.build_output_stream_raw(
            config, sample_format, on_data, error_callback, timeout
        )

    @abc.abstractmethod
    def build_input_stream_raw(
        self,
        config: StreamConfig,
        sample_format: SampleFormat,
        data_callback: InputDataCallback,
        error_callback: ErrorCallback,
        timeout: Optional[float] = None,
    ) -> StreamTrait:
        """Create a dynamically typed input stream."""

    @abc.abstractmethod
    def build_output_stream_raw(
        self,
        config: StreamConfig,
        sample_format: SampleFormat,
        data_callback: OutputDataCallback,
        error_callback: ErrorCallback,
        timeout: Optional[float] = None,
    ) -> StreamTrait:
        """Create a dynamically typed output stream."""


class HostTrait(abc.ABC):
    """Access to the audio devices available through one audio system."""

    @classmethod
    @abc.abstractmethod
    def is_available(cls) -> bool:
        """Whether this host is available on the system."""

    @abc.abstractmethod
    def devices(self) -> Iterable[DeviceTrait]:
        """All devices currently available to the host."""

    @abc.abstractmethod
    def default_input_device(self) -> Optional[DeviceTrait]:
        """The default input device, or None if there is none."""

    @abc.abstractmethod
    def default_output_device(self) -> Optional[DeviceTrait]:
        """The default output device, or None if there is none."""

    def input_devices(self) -> Iterator[DeviceTrait]:
        """The devices that support at least one input configuration."""
        devices = self.devices()
        return (device for device in devices if device.supports_input())

    def output_devices(self) -> Iterator[DeviceTrait]:
        """The devices that support at least one output configuration."""
        devices = self.devices()
        return (device for device in devices if device.supports_output())


def _has_any(query: Callable[[], Iterable[Any]]) -> bool:
    try:
        configs = query()
        return next(iter(configs), None) is not None
    except Exception:
        return False


def _typed_view(data: Data, sample_format: SampleFormat) -> memoryview:
    view = data.as_slice(sample_format)
    if view is None:
        raise TypeError(
            f"host supplied incorrect sample type: expected {sample_format}, "
            f"got {data.sample_format}"
        )
    return view
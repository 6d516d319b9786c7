"""Tests for SoundPlayer with mocked sounddevice."""

from unittest.mock import patch

import numpy as np
import pytest

from spooky_sounds.errors import DeviceUnavailableError, PlaybackWriteError
from spooky_sounds.player import SoundPlayer, list_devices


class FakePortAudioError(Exception):
    pass


@pytest.fixture
def mock_sd():
    with patch("spooky_sounds.player.sd") as sd:
        sd.PortAudioError = FakePortAudioError
        sd.OutputStream.return_value.write.return_value = False
        yield sd


@pytest.fixture
def player():
    return SoundPlayer()


class TestPlay:
    def test_opens_mono_int16_44100_stream(self, mock_sd, player):
        player.play("hw:1,0", np.array([1, 2, 3], dtype=np.int16))
        mock_sd.OutputStream.assert_called_once_with(
            device="hw:1,0", channels=1, dtype="int16", samplerate=44100
        )

    def test_writes_all_samples_in_one_call(self, mock_sd, player):
        samples = np.array([5, -5, 100, -32768, 32767], dtype=np.int16)
        player.play("bluealsa", samples)

        stream = mock_sd.OutputStream.return_value
        stream.write.assert_called_once()
        written = stream.write.call_args[0][0]
        assert written.dtype == np.int16
        assert written.shape == (5, 1)
        np.testing.assert_array_equal(written[:, 0], samples)

    def test_stream_started_stopped_and_closed(self, mock_sd, player):
        player.play("bluealsa", np.zeros(10, dtype=np.int16))
        stream = mock_sd.OutputStream.return_value
        stream.start.assert_called_once()
        stream.stop.assert_called_once()
        stream.close.assert_called_once()

    def test_empty_buffer_is_a_noop(self, mock_sd, player):
        player.play("bluealsa", np.array([], dtype=np.int16))
        stream = mock_sd.OutputStream.return_value
        stream.write.assert_not_called()
        stream.close.assert_called_once()


class TestPlayErrors:
    def test_unknown_device(self, mock_sd, player):
        mock_sd.OutputStream.side_effect = ValueError(
            "No output device matching 'nonexistent-device'"
        )
        with pytest.raises(DeviceUnavailableError) as exc_info:
            player.play("nonexistent-device", np.ones(4, dtype=np.int16))
        assert exc_info.value.device == "nonexistent-device"
        mock_sd.OutputStream.return_value.write.assert_not_called()

    def test_device_open_failure(self, mock_sd, player):
        mock_sd.OutputStream.side_effect = FakePortAudioError("Device unavailable")
        with pytest.raises(DeviceUnavailableError):
            player.play("bluealsa", np.ones(4, dtype=np.int16))

    def test_write_failure_still_closes(self, mock_sd, player):
        stream = mock_sd.OutputStream.return_value
        stream.write.side_effect = FakePortAudioError("Broken pipe")
        with pytest.raises(PlaybackWriteError) as exc_info:
            player.play("bluealsa", np.ones(4, dtype=np.int16))
        assert exc_info.value.device == "bluealsa"
        stream.close.assert_called_once()

    def test_start_failure_is_write_failure(self, mock_sd, player):
        stream = mock_sd.OutputStream.return_value
        stream.start.side_effect = FakePortAudioError("Error starting stream")
        with pytest.raises(PlaybackWriteError):
            player.play("bluealsa", np.ones(4, dtype=np.int16))
        stream.close.assert_called_once()

    @patch("spooky_sounds.player.sd", None)
    def test_missing_portaudio(self, player):
        with pytest.raises(DeviceUnavailableError):
            player.play("bluealsa", np.ones(4, dtype=np.int16))


class TestListDevices:
    def test_lists_query_devices(self, mock_sd):
        mock_sd.query_devices.return_value = "0 bluealsa, ALSA (0 in, 2 out)"
        assert "bluealsa" in list_devices()

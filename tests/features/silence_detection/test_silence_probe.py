import pytest
from pathlib import Path

from silence_splitter.core.exceptions import ProbeError
from silence_splitter.core.tools.locator import ToolConfig
from silence_splitter.features.silence_detection.data.ffmpeg_probe import FFmpegSilenceProbe
from silence_splitter.features.silence_detection.domain.models import DetectionConfig
from silence_splitter.features.silence_detection.service.api import detect_segments

from conftest import SAMPLE_SILENCE_OUTPUT


def test_default_command_is_analysis_only():
    probe = FFmpegSilenceProbe(ToolConfig(ffmpeg_binary="/opt/ffmpeg"))

    cmd = probe.build_command(Path("/music/talk.mp3"))

    assert cmd == [
        "/opt/ffmpeg",
        "-i", "/music/talk.mp3",
        "-af", "silencedetect=noise=-30dB:d=1",
        "-f", "null",
        "-"
    ]


def test_detection_config_controls_filter():
    config = DetectionConfig(noise_db=-42.5, min_duration=0.75)
    assert config.filter_expression == "silencedetect=noise=-42.5dB:d=0.75"


def test_probe_returns_stderr_text(fake_ffmpeg, tmp_path):
    audio = tmp_path / "talk.mp3"
    audio.write_bytes(b"FAKE_AUDIO")

    output = FFmpegSilenceProbe(fake_ffmpeg.tools).probe(audio)

    assert output == SAMPLE_SILENCE_OUTPUT
    [call] = fake_ffmpeg.calls()
    assert "-af" in call and "null" in call
    assert fake_ffmpeg.stdin_kinds() == ["null"]


def test_probe_failure_carries_output(fake_ffmpeg, tmp_path):
    audio = tmp_path / "broken.mp3"
    audio.write_bytes(b"")
    fake_ffmpeg.set_output("broken.mp3", "broken.mp3: Invalid data found when processing input\n")
    fake_ffmpeg.fail_probe("broken.mp3")

    with pytest.raises(ProbeError) as exc_info:
        FFmpegSilenceProbe(fake_ffmpeg.tools).probe(audio)

    err = exc_info.value
    assert err.path == audio
    assert "Invalid data found" in err.output
    assert "exited with status 1" in str(err)


def test_probe_failure_when_binary_cannot_launch(tmp_path):
    tools = ToolConfig(ffmpeg_binary=str(tmp_path / "no-such-ffmpeg"))

    with pytest.raises(ProbeError) as exc_info:
        FFmpegSilenceProbe(tools).probe(tmp_path / "talk.mp3")

    assert exc_info.value.output == ""


def test_detect_segments_service(fake_ffmpeg, tmp_path):
    audio = tmp_path / "talk.mp3"
    audio.write_bytes(b"FAKE_AUDIO")

    segments = detect_segments(str(audio), fake_ffmpeg.tools)

    assert [(s.index, s.start, s.end) for s in segments] == [(0, 2.5, 10.0), (1, 10.8, 20.0)]

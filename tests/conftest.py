# File: tests/conftest.py

import os
import sys
import json
import stat
import textwrap
import threading
from pathlib import Path
from typing import Dict, List

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

from silence_splitter.core.exceptions import ProbeError, ExportError
from silence_splitter.core.tools.locator import ToolConfig
from silence_splitter.features.silence_detection.domain.interfaces import ISilenceProbe
from silence_splitter.features.segment_export.domain.interfaces import ISegmentExporter
from silence_splitter.features.segment_export.domain.models import ExportResult
from silence_splitter.features.segment_export.data.ffmpeg_adapter import build_output_path


# Analyzer output for a file with leading silence and two cut points:
# ends=[2.5, 10.8], starts=[0.0, 10.0, 20.0] -> segments (2.5, 10.0), (10.8, 20.0)
SAMPLE_SILENCE_OUTPUT = textwrap.dedent("""\
    Input #0, mp3, from 'talk.mp3':
      Duration: 00:00:25.00, start: 0.025057, bitrate: 128 kb/s
    [silencedetect @ 0x55d0c3b0] silence_start: 0.000000
    [silencedetect @ 0x55d0c3b0] silence_end: 2.500000 | silence_duration: 2.500000
    [silencedetect @ 0x55d0c3b0] silence_start: 10.000000
    [silencedetect @ 0x55d0c3b0] silence_end: 10.800000 | silence_duration: 0.800000
    [silencedetect @ 0x55d0c3b0] silence_start: 20.000000
    size=N/A time=00:00:25.00 bitrate=N/A speed= 512x
""")

NO_SILENCE_OUTPUT = textwrap.dedent("""\
    Input #0, mp3, from 'music.mp3':
      Duration: 00:03:10.00, start: 0.025057, bitrate: 320 kb/s
    size=N/A time=00:03:10.00 bitrate=N/A speed= 640x
""")


# --- In-memory fakes for the ffmpeg boundary ---

class FakeProbe(ISilenceProbe):
    """Returns canned analyzer output keyed by file name."""

    def __init__(self, outputs: Dict[str, str] = None, default: str = SAMPLE_SILENCE_OUTPUT,
                 failing: set = frozenset()):
        self.outputs = outputs or {}
        self.default = default
        self.failing = set(failing)
        self.calls: List[Path] = []
        self._lock = threading.Lock()

    def probe(self, audio_path: Path) -> str:
        with self._lock:
            self.calls.append(audio_path)
        if audio_path.name in self.failing:
            raise ProbeError(audio_path, "ffmpeg exited with status 1", output="Invalid data found")
        return self.outputs.get(audio_path.name, self.default)


class FakeExporter(ISegmentExporter):
    """Records export requests instead of cutting files."""

    def __init__(self, fail_at: Dict[str, int] = None):
        self.fail_at = fail_at or {}
        self.calls: List[tuple] = []
        self._lock = threading.Lock()

    def export_segments(self, source_path, segments):
        with self._lock:
            self.calls.append((source_path, list(segments)))

        result = ExportResult(source_path=source_path)
        for segment in segments:
            if self.fail_at.get(source_path.name) == segment.index:
                raise ExportError(source_path, segment.index, "Conversion failed!")
            result.output_paths.append(build_output_path(source_path, segment.index))
        return result


@pytest.fixture
def fake_probe():
    return FakeProbe()


@pytest.fixture
def fake_exporter():
    return FakeExporter()


# --- A stand-in ffmpeg executable for adapter tests ---

FAKE_FFMPEG_SCRIPT = """#!{python}
import json, os, sys

HERE = os.path.dirname(os.path.abspath(__file__))
with open(os.path.join(HERE, "fake_ffmpeg.json")) as fh:
    behaviour = json.load(fh)

args = sys.argv[1:]
with open(os.path.join(HERE, "fake_ffmpeg_calls.log"), "a") as fh:
    fh.write(json.dumps(args) + "\\n")

try:
    stdin_is_null = os.fstat(0).st_rdev == os.stat(os.devnull).st_rdev
except OSError:
    stdin_is_null = False
with open(os.path.join(HERE, "fake_ffmpeg_stdin.log"), "a") as fh:
    fh.write(("null" if stdin_is_null else "inherited") + "\\n")

source = os.path.basename(args[args.index("-i") + 1])

if "-af" in args:
    sys.stderr.write(behaviour["probe_outputs"].get(source, behaviour["default_output"]))
    sys.exit(1 if source in behaviour["failing_probes"] else 0)

output = args[-1]
if os.path.exists(output) and "-y" not in args:
    sys.stderr.write("File '" + output + "' already exists. Exiting.\\n")
    sys.exit(1)

if os.path.basename(output) in behaviour["failing_exports"]:
    sys.stderr.write("Conversion failed!\\n")
    sys.exit(1)

with open(output, "w") as fh:
    fh.write("segment " + args[args.index("-ss") + 1] + " " + args[args.index("-to") + 1])
"""


class FakeFFmpeg:
    """
    Writes an executable that imitates the two ffmpeg invocations we make.
    Behaviour is read from a JSON file next to it, so tests can change it freely.
    """

    def __init__(self, root: Path):
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)
        self.binary = root / "ffmpeg"
        self.binary.write_text(FAKE_FFMPEG_SCRIPT.format(python=sys.executable))
        self.binary.chmod(self.binary.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

        self.behaviour = {
            "default_output": SAMPLE_SILENCE_OUTPUT,
            "probe_outputs": {},
            "failing_probes": [],
            "failing_exports": [],
        }
        self._save()

    def _save(self):
        (self.root / "fake_ffmpeg.json").write_text(json.dumps(self.behaviour))

    @property
    def tools(self) -> ToolConfig:
        return ToolConfig(ffmpeg_binary=str(self.binary))

    def set_output(self, filename: str, text: str):
        self.behaviour["probe_outputs"][filename] = text
        self._save()

    def fail_probe(self, filename: str):
        self.behaviour["failing_probes"].append(filename)
        self._save()

    def fail_export(self, output_filename: str):
        self.behaviour["failing_exports"].append(output_filename)
        self._save()

    def calls(self) -> List[List[str]]:
        log = self.root / "fake_ffmpeg_calls.log"
        if not log.exists():
            return []
        return [json.loads(line) for line in log.read_text().splitlines()]

    def stdin_kinds(self) -> List[str]:
        log = self.root / "fake_ffmpeg_stdin.log"
        if not log.exists():
            return []
        return log.read_text().splitlines()


@pytest.fixture
def fake_ffmpeg(tmp_path):
    if sys.platform == "win32":
        pytest.skip("Fake ffmpeg relies on a shebang script")
    return FakeFFmpeg(tmp_path / "bin")


@pytest.fixture
def audio_tree(tmp_path):
    """
    /library
      talk.mp3
      /season1
        ep1.MP3
        ep2.Mp3
        notes.txt
      /season2
        ep3.mp3x
    """
    root = tmp_path / "library"
    season1 = root / "season1"
    season2 = root / "season2"
    season1.mkdir(parents=True)
    season2.mkdir()

    (root / "talk.mp3").write_bytes(b"FAKE_AUDIO")
    (season1 / "ep1.MP3").write_bytes(b"FAKE_AUDIO")
    (season1 / "ep2.Mp3").write_bytes(b"FAKE_AUDIO")
    (season1 / "notes.txt").write_text("not audio")
    (season2 / "ep3.mp3x").write_bytes(b"FAKE_AUDIO")
    return root


@pytest.fixture
def ledger_url(tmp_path):
    return f"sqlite:///{tmp_path / 'ledger.db'}"

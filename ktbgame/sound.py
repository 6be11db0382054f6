"""Playing sound files in the background through an external player."""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .utils import get_time

_HASH_MASK = (1 << 64) - 1
_SILENT_HASH = 2784


def hash_name(name: str) -> int:
    """djb2 hash of ``name`` on 64-bit unsigned arithmetic."""
    value = 5381
    for byte in name.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        value = ((value << 5) + value + char) & _HASH_MASK
    return value


def _report(message: str) -> None:
    sys.stderr.write(message + "\n")
    sys.stderr.flush()


@dataclass
class SoundPlayer:
    """Starts ``.ogg`` files from ``audio_dir`` and keeps one track looping."""

    audio_dir: str = "assets/audio"
    command: str = "paplay"
    clock: Callable[[], int] = get_time
    looped: str | None = None
    loop_time: int = 0
    loop_start: int = 0

    def _kill(self) -> bool:
        try:
            result = subprocess.run(["pkill", "-f", self.command], check=False)
        except OSError as exc:
            _report(f"cannot stop sounds: {exc}")
            return False
        return result.returncode == 0

    def play(self, name: str, wait: bool = False, stop: bool = False,
             attenuated: bool = False) -> None:
        """Play ``name``.ogg; block if ``wait``, stop other sounds first if ``stop``."""
        if stop and not self._kill():
            _report("cannot stop playing sounds")
        if hash_name(name) == _SILENT_HASH:
            return
        volume = 30000 if attenuated else 40000
        args = [self.command, f"--volume={volume}",
                str(Path(self.audio_dir) / f"{name}.ogg")]
        try:
            if wait:
                result = subprocess.run(args, check=False)
                if result.returncode != 0:
                    _report(f"playing {name} failed")
            else:
                subprocess.Popen(args)
        except OSError as exc:
            _report(f"cannot play {name}: {exc}")

    def play_loop(self, name: str, duration: int) -> None:
        """Play ``name`` now and again every ``duration`` milliseconds."""
        self.loop_time = duration
        self.looped = name
        self.play(name)
        self.loop_start = self.clock()

    def stop_all(self) -> None:
        """Stop every playing sound and the loop."""
        self._kill()
        self.loop_start = 0

    def tick(self) -> bool:
        """Restart the looped track if its time is up; return whether it did."""
        if not self.loop_start or self.looped is None:
            return False
        if self.clock() - self.loop_start < self.loop_time:
            return False
        self.play(self.looped)
        self.loop_start = self.clock()
        return True
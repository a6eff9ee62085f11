"""Synthesized tone cues played through pygame's mixer."""
import logging
import math
import threading
import time
from array import array

import pygame

from termsnake import config
from termsnake.model import Cue

logger = logging.getLogger(__name__)

# (frequency Hz, duration ms, pause after ms)
CUE_TONES = {
    Cue.EAT: [(800, 50, 0)],
    Cue.POWER_UP: [(600, 100, 50), (800, 100, 50), (1000, 100, 0)],
    Cue.LEVEL_UP: [(1000, 100, 80), (1200, 100, 0)],
    Cue.GAME_OVER: [(400, 200, 100), (300, 200, 100), (200, 300, 0)],
}


def create_tone(frequency_hz, duration_ms, volume=0.3, attack_ms=5, release_ms=20):
    """Generate a mono PCM sine tone with a soft envelope."""
    sample_count = max(1, int(config.SAMPLE_RATE * (duration_ms / 1000.0)))
    amplitude = int(32767 * max(0.0, min(volume, 1.0)))
    attack_samples = int(config.SAMPLE_RATE * (attack_ms / 1000.0))
    release_samples = int(config.SAMPLE_RATE * (release_ms / 1000.0))
    release_start = max(0, sample_count - release_samples)
    step = (2.0 * math.pi * frequency_hz) / config.SAMPLE_RATE

    pcm = array("h")
    for i in range(sample_count):
        env = 1.0
        if attack_samples > 0 and i < attack_samples:
            env = i / attack_samples
        if release_samples > 0 and i >= release_start:
            env *= max(0.0, (sample_count - i) / release_samples)
        pcm.append(int(amplitude * env * math.sin(step * i)))
    return pcm


class ToneCues:
    """Cue emitter; each cue plays on its own thread and is never waited on."""

    def __init__(self, enabled=config.SOUND_ENABLED):
        self.enabled = False
        self.sounds = {}
        self._lock = threading.Lock()
        self._closed = False
        if enabled:
            self.enabled = self._init_mixer()

    def _init_mixer(self):
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=config.SAMPLE_RATE, size=-16, channels=1, buffer=512)
            for tones in CUE_TONES.values():
                for freq, duration, _ in tones:
                    if (freq, duration) not in self.sounds:
                        pcm = create_tone(freq, duration)
                        self.sounds[freq, duration] = pygame.mixer.Sound(buffer=pcm.tobytes())
        except pygame.error as exc:
            logger.warning("sound disabled: %s", exc)
            self.sounds = {}
            return False
        return True

    def __call__(self, cue):
        self.emit(cue)

    def emit(self, cue):
        if not self.enabled:
            return
        threading.Thread(target=self._play, args=(cue,), daemon=True).start()

    def _play(self, cue):
        for freq, duration, pause_ms in CUE_TONES[cue]:
            # close() holds the lock while the mixer shuts down
            with self._lock:
                if self._closed:
                    return
                try:
                    self.sounds[freq, duration].play()
                except pygame.error as exc:
                    logger.debug("cue %s stopped: %s", cue.name, exc)
                    return
            if pause_ms:
                time.sleep(pause_ms / 1000.0)

    def close(self):
        """Shut the mixer down; cues still running stop before their next tone."""
        with self._lock:
            self._closed = True
            if self.enabled:
                pygame.mixer.quit()
                self.enabled = False

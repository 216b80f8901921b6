import logging
import os

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect
from PyQt6.QtWidgets import QApplication

from pomodoro_desk.core.controller import Cue

logger = logging.getLogger(__name__)

class SoundPlayer(QObject):
    """
    Plays the start/expired cues. A cue without a usable sound file
    falls back to QApplication.beep().
    """
    def __init__(self, sound_files=None, volume=0.6, parent=None):
        super().__init__(parent)
        self.effects = {}
        for cue, path in (sound_files or {}).items():
            if not path:
                continue
            if not os.path.exists(path):
                logger.warning("sound file for %s cue not found: %s", cue.value, path)
                continue
            effect = QSoundEffect(parent=self)
            effect.setSource(QUrl.fromLocalFile(path))
            effect.setLoopCount(1)
            effect.setVolume(volume)
            self.effects[cue] = effect

    def play(self, cue):
        effect = self.effects.get(cue)
        if effect is None or effect.status() == QSoundEffect.Status.Error:
            QApplication.beep()
            return
        effect.play()

def cue_files_from_config(config):
    return {
        Cue.START: config.get("start_sound"),
        Cue.EXPIRED: config.get("expired_sound"),
    }

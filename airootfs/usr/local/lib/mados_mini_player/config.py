"""
madOS Mini Player - Configuration constants
"""

# Window
WINDOW_TITLE = "madOS Mini Player"
WINDOW_WIDTH = 400
WINDOW_HEIGHT = 200
TITLE_TEXT = "madOS Player:"

# Labels
NO_FILE_TEXT = "No file has been selected"
VOLUME_LABEL_FORMAT = "Volume: {percent:.0f}%"

# Volume slider range (percent). The display always starts at the midpoint,
# the real system volume is never queried.
VOLUME_MIN = 0.0
VOLUME_MAX = 100.0
VOLUME_STEP = 1.0
DEFAULT_VOLUME_PERCENT = 50.0
VOLUME_KEY_STEP = 5.0

# Seeking
SEEK_STEP_SECONDS = 10

# Icons (freedesktop icon names)
ICON_SEEK_BACKWARD = "media-seek-backward"
ICON_SEEK_FORWARD = "media-seek-forward"
ICON_RESTART = "view-refresh"

# Audio file extensions offered by the open dialog filter
AUDIO_EXTENSIONS = {
    '.mp3', '.flac', '.ogg', '.opus', '.wav', '.aac', '.m4a',
    '.wma', '.ape', '.mka', '.webm', '.aiff', '.aif', '.alac',
    '.wv', '.ac3', '.amr', '.au', '.mid', '.midi',
}

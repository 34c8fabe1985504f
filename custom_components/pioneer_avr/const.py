"""Constants for the Pioneer AVR integration."""

DOMAIN = "pioneer_avr"

# Defaults
DEFAULT_PORT = 80
DEFAULT_NAME = "Pioneer AVR"

# Update interval
SCAN_INTERVAL = 30

# HTTP request timeout (seconds)
DEFAULT_TIMEOUT = 10

# Web control endpoints
STATUS_PATH = "/StatusHandler.asp"
COMMAND_PATH = "/EventHandler.asp"
COMMAND_PARAM = "WebToHostItem"

# Volume range (Pioneer raw scale 0-185, 0.5 dB per step)
VOLUME_MIN = 0
VOLUME_MAX = 185
VOLUME_MIN_LEVEL = 1
VOLUME_MAX_LEVEL = 185
VOLUME_MIN_DB = -80.0
VOLUME_MAX_DB = 12.0

# Entity services
SERVICE_VOLUME_STEP_UP = "volume_step_up"
SERVICE_VOLUME_STEP_DOWN = "volume_step_down"
SERVICE_TOGGLE_MUTE = "toggle_mute"
ATTR_STEPS = "steps"

# Extra state attributes
ATTR_VOLUME_RAW = "volume_raw"
ATTR_VOLUME_DB = "volume_db"
ATTR_VOLUME_DISPLAY = "volume_display"
ATTR_INPUT_CODE = "input_code"

# Friendly source labels, keyed by input selector name
SOURCES = {
    "phono": "Phono",
    "cd": "CD",
    "tuner": "Tuner",
    "cd-tape": "CD-R/Tape",
    "dvd": "DVD",
    "tv/sat": "TV/SAT",
    "video-1": "Video 1",
    "multi-channel-in": "Multi Channel In",
    "video-2": "Video 2",
    "dvd/bdr": "DVR/BDR",
    "ipod-usb": "iPod/USB",
    "xm-radio": "XM Radio",
    "hdmi-1": "HDMI 1",
    "hdmi-2": "HDMI 2",
    "hdmi-3": "HDMI 3",
    "hdmi-4": "HDMI 4",
    "hdmi-5": "HDMI 5",
    "bd": "BD",
    "sirius": "Sirius",
    "adapter-port": "Adapter Port",
}

# Reverse mapping
SOURCE_NAMES = {v: k for k, v in SOURCES.items()}

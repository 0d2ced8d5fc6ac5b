"""Constants for motu-volume."""

DEFAULT_ADDRESS = "192.168.88.251"

# How many steps between min and max
VOLUME_DENOMINATIONS = 16

VOLUME_SOUND = (
    "/System/Library/LoginPlugins/BezelServices.loginPlugin"
    "/Contents/Resources/volume.aiff"
)
SOUND_PLAYER = "afplay"

# Seconds; aiohttp's own default is five minutes
DEFAULT_TIMEOUT = 10.0

MUTE_OFF = 0.0
MUTE_ON = 1.0

COMMAND_MUTE = "mute"
COMMANDS_INCREMENT = ("inc", "increment")
COMMANDS_DECREMENT = ("dec", "decrement")

# Raw device table; validated into Device instances by config.load_devices().
# For log scale devices max/min are dB (as shown in the MOTU UI) while
# zero_volume is an amplitude ratio.
DEFAULT_DEVICES: dict[str, dict[str, object]] = {
    "main": {
        "property": "datastore/ext/obank/1/ch/0/stereoTrim",
        "mute_property": "datastore/mix/main/0/matrix/mute",
        "scale": "linear",
        "max": 0,
        "min": -50,
        "zero_volume": -127,
    },
    "computer": {
        "property": "datastore/mix/chan/10/matrix/fader",
        "mute_property": "datastore/mix/chan/10/matrix/mute",
        "scale": "log",
        "max": 0,
        "min": -64,
        "zero_volume": 0,
    },
}

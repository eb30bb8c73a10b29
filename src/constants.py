"""
Global constants for Load64.
Contains path configuration, display settings, card sizes and timing constants.
"""

import os

# **************************************************************** #
#                       Build Info                                     #
# **************************************************************** #
APP_NAME = "Load64"
APP_VERSION = "dev"

# **************************************************************** #
#                       Environment Detection                        #
# **************************************************************** #
DEV_MODE = os.getenv("DEV_MODE", "false").lower() == "true"

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))

# **************************************************************** #
#                       Path Configuration                           #
# **************************************************************** #
if DEV_MODE:
    TEMP_LOG_DIR = os.path.join(SCRIPT_DIR, "..", "workdir")
    CONFIG_FILE = os.path.join(SCRIPT_DIR, "..", "workdir", "config.json")
    DEFAULT_GAMES_DIR = os.path.join(SCRIPT_DIR, "..", "games")
else:
    TEMP_LOG_DIR = SCRIPT_DIR
    CONFIG_FILE = os.path.join(SCRIPT_DIR, "config.json")
    DEFAULT_GAMES_DIR = os.path.join(SCRIPT_DIR, "games")

VISIBILITY_FILE_NAME = "hidden_games.json"
CONTROLLER_MAPPING_FILE_NAME = "controller_mapping.json"

# **************************************************************** #
#                       Game Directory Layout                        #
# **************************************************************** #
GAME_CONFIG_FILE_NAME = "config.json"
MEDIA_DIR_NAME = "media"
MEDIA_EXTENSIONS = ("png", "jpg", "jpeg")

# **************************************************************** #
#                       Display Settings                             #
# **************************************************************** #
FPS = 30
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

# **************************************************************** #
#                       Carousel Dimensions                          #
# **************************************************************** #
CARD_WIDTH = 240
CARD_HEIGHT = 320
CURRENT_CARD_SCALE = 1.2
CARD_SPACING = 10

# **************************************************************** #
#                       Navigation Timing                            #
# **************************************************************** #
NAVIGATION_INITIAL_DELAY = 250  # ms before repeating starts
NAVIGATION_START_RATE = 200  # ms between repeats when starting (slow)
NAVIGATION_MAX_RATE = 50  # ms between repeats at maximum speed (fast)
NAVIGATION_ACCELERATION = 0.90  # Acceleration factor per repeat
AXIS_THRESHOLD = 0.5  # Analog stick deflection that counts as a press

"""Fixed terminal wording for every game phase."""

WELCOME = "Greetings, adventurer!"
BEFORE_START = "Before the game begins..."

NAME_PROMPT = "...tell me your name: "
HELLO = "Hello, {name}"
BASE_STATS = "Right now your stamina is {stamina}, attack is {attack} and defense is {defense}."
PATHS_INTRO = "You may choose one of three paths of power:"

CLASS_PROMPT = "Enter the character class: Warrior - warrior, Mage - mage, Healer - healer: "
UNKNOWN_CLASS = "Unknown character class. Try again."
CONFIRM_PROMPT = "Press (Y) to confirm your choice, or any other key to pick another character: "

COMMAND_PROMPT = "Enter a command: "
TRAINING_OVER = "Training is over."
UNKNOWN_COMMAND = "Unknown command. Try: {commands} or {skip}"

SKIP_COMMAND = "skip"
CONFIRM_TOKEN = "y"

INSTRUCTIONS = (
    "Practice using your skills.",
    "Enter one of the commands:",
    "  attack - to attack the opponent",
    "  defense - to block the opponent's attack",
    "  special - to use your special power",
    "  skip - to finish the training",
)

ERROR_PREFIX = "Game error: "

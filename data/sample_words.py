"""Built-in sample words for quick games."""

from typing import Iterable, List, Optional
import random

SAMPLE_WORDS = [
    "accordion", "alien", "avalanche", "bacon", "ballerina", "banjo", "barnacle", "beard", "beehive", "bicycle",
    "bingo", "blender", "blobfish", "boomerang", "broomstick", "bubble", "bulldozer", "burrito", "cactus", "cannonball",
    "carnival", "caterpillar", "cheeseburger", "cheetah", "chimney", "clown", "coconut", "compass", "cookie", "cowboy",
    "crayon", "crowbar", "cupcake", "dinosaur", "doughnut", "dracula", "dragon", "drill", "drone", "duckling",
    "earmuffs", "eclipse", "eel", "elbow", "emu", "fairy", "falcon", "fireplace", "flamingo", "flippers",
    "fridge", "funnel", "gargoyle", "gazebo", "giraffe", "goblin", "goggles", "grapefruit", "grenade", "guillotine",
    "gumdrop", "hamster", "hammock", "hang glider", "helicopter", "hippopotamus", "hobo", "hotdog", "hoverboard", "hula hoop",
    "iceberg", "igloo", "invisible ink", "jellyfish", "jigsaw", "joystick", "jukebox", "kangaroo", "kazoo", "ketchup",
    "kite", "knight", "koala", "ladle", "lampshade", "lantern", "lava", "leprechaun", "limousine", "lizard",
    "lobster", "magnet", "mango", "manatee", "marshmallow", "mermaid", "meteor", "microscope", "mime", "moose",
    "mop", "mushroom", "narwhal", "nightlight", "ninja", "noodle", "octopus", "omelet", "ostrich", "otter",
    "pail", "panther", "parrot", "peacock", "penguin", "piñata", "pirate", "platypus", "plunger", "popcorn",
    "porcupine", "pretzel", "pyramid", "quicksand", "quokka", "raccoon", "rainbow", "raspberry", "rhinoceros", "rollercoaster",
    "sandcastle", "sasquatch", "scarecrow", "scarf", "shark", "shopping cart", "slingshot", "snail", "snowball", "spaceship",
    "spatula", "sphinx", "squid", "squirrel", "stapler", "suitcase", "swamp", "swan", "taco", "tarantula",
    "teacup", "telescope", "thermometer", "thumbtack", "toaster", "toilet", "tomato", "trampoline", "trombone", "trophy",
    "turtle", "unicorn", "vacuum", "vampire", "volcano", "waffle", "wagon", "walrus", "werewolf", "whale",
    "wig", "windmill", "wizard", "xylophone", "yeti", "yo-yo", "zebra", "zeppelin", "zombie",
]


def get_random_words(count: int, exclude: Optional[Iterable[str]] = None) -> List[str]:
    """Get up to `count` random sample words, skipping any in `exclude` (case-insensitive)."""
    existing = {text.lower() for text in (exclude or [])}
    available = [w for w in SAMPLE_WORDS if w.lower() not in existing]
    return random.sample(available, min(count, len(available)))


def get_sample_word_count() -> int:
    """Get the total number of sample words."""
    return len(SAMPLE_WORDS)

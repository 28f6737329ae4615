"""Built-in word lists, one per level, grouped by word length."""
from __future__ import annotations

from wordfall_spawn import StaticWordPool

LEVEL_WORDS: dict[int, list[str]] = {
    1: [
        "cat", "dog", "sun", "map", "red", "box", "jam", "fig", "hat", "log",
        "pen", "cup", "web", "zip", "owl", "ink", "bus", "kit", "net", "yak",
        "arm", "bed", "cow", "fox", "gum", "hum", "ice", "jet", "key", "lid",
    ],
    2: [
        "rock", "tree", "fish", "moon", "star", "frog", "milk", "ship", "lamp", "wolf",
        "snow", "rain", "gate", "bell", "coin", "drum", "leaf", "nest", "pond", "seed",
        "crab", "dust", "harp", "kite", "mask", "oven", "plum", "rope", "tide", "vine",
    ],
    3: [
        "apple", "brick", "cloud", "dream", "eagle", "flame", "grape", "house", "jelly", "knife",
        "lemon", "mango", "night", "ocean", "piano", "queen", "river", "stone", "tiger", "union",
        "vapor", "whale", "yacht", "zebra", "blaze", "crane", "forge", "ghost", "lunar", "storm",
    ],
    4: [
        "anchor", "bridge", "castle", "dragon", "engine", "forest", "garden", "harbor", "island", "jungle",
        "kernel", "legend", "marble", "nebula", "orange", "planet", "quartz", "rocket", "silver", "tunnel",
        "voyage", "walnut", "yellow", "zipper", "beacon", "canyon", "falcon", "glider", "meteor", "signal",
    ],
    5: [
        "asteroid", "blizzard", "calendar", "dinosaur", "elephant", "fountain", "galaxies", "horizon",
        "keyboard", "labyrinth", "mountain", "notebook", "observer", "platform", "question", "railroad",
        "sapphire", "treasure", "umbrella", "velocity", "whirlpool", "xylophone", "yearbook", "zeppelin",
        "cathedral", "satellite", "telescope", "volcanic", "wildfire", "starlight",
    ],
}


def make_word_pool() -> StaticWordPool:
    return StaticWordPool(LEVEL_WORDS)

"""Rejection reasons for invalid game actions.

Each reason is distinct so hosts can tell exactly which rule a command broke.
"""

ACTOR_NOT_ACTIVE = "Actor is not active."
ACTOR_NOT_FOUND = "Actor not found."
ACTOR_DEAD = "Actor is dead."

ALREADY_MOVED = "Actor has already moved this turn."
OUT_OF_BOUNDS = "Move out of bounds."
ALREADY_AT_DESTINATION = "Already at destination."
DESTINATION_BLOCKED = "Destination is blocked."
DESTINATION_OCCUPIED = "Destination is occupied."
NO_PATH = "No path to destination."
PATH_TOO_LONG = "Path exceeds speed."

TARGET_NOT_FOUND = "Target not found."
TARGET_DEAD = "Target is already dead."
TARGET_OUT_OF_RANGE = "Target out of range."

ACTIVE_NOT_IN_INITIATIVE = "Active combatant not in initiative."

ALL_REASONS = frozenset({
    ACTOR_NOT_ACTIVE,
    ACTOR_NOT_FOUND,
    ACTOR_DEAD,
    ALREADY_MOVED,
    OUT_OF_BOUNDS,
    ALREADY_AT_DESTINATION,
    DESTINATION_BLOCKED,
    DESTINATION_OCCUPIED,
    NO_PATH,
    PATH_TOO_LONG,
    TARGET_NOT_FOUND,
    TARGET_DEAD,
    TARGET_OUT_OF_RANGE,
    ACTIVE_NOT_IN_INITIATIVE,
})

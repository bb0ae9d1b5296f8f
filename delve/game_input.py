from __future__ import annotations

from typing import Dict, Optional

import pygame

from delve.systems.turns import Command

MOD_MASK = pygame.KMOD_SHIFT | pygame.KMOD_CTRL | pygame.KMOD_ALT


def encode_keybinding(keycode: int, mods: int = 0) -> int:
    """
    Encode a key + modifiers into a single int so bindings can distinguish combos.
    """
    return int(keycode) | ((int(mods) & MOD_MASK) << 16)


def _normalise_mods(mods: int) -> int:
    # collapse left/right variants so either Alt key matches KMOD_ALT
    out = 0
    if mods & pygame.KMOD_SHIFT:
        out |= pygame.KMOD_SHIFT
    if mods & pygame.KMOD_CTRL:
        out |= pygame.KMOD_CTRL
    if mods & pygame.KMOD_ALT:
        out |= pygame.KMOD_ALT
    return out


DEFAULT_BINDINGS: Dict[int, Command] = {
    encode_keybinding(pygame.K_UP): Command.MOVE_UP,
    encode_keybinding(pygame.K_DOWN): Command.MOVE_DOWN,
    encode_keybinding(pygame.K_LEFT): Command.MOVE_LEFT,
    encode_keybinding(pygame.K_RIGHT): Command.MOVE_RIGHT,
    encode_keybinding(pygame.K_RETURN, pygame.KMOD_ALT): Command.TOGGLE_DISPLAY_MODE,
}

# Keys that act whatever modifiers are held.
ANY_MOD_BINDINGS: Dict[int, Command] = {
    pygame.K_ESCAPE: Command.QUIT,
}

MOVE_KEYS = (pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT)


def map_key(key: int, mods: int = 0, bindings: Optional[Dict[int, Command]] = None) -> Optional[Command]:
    """Translate a key press into a Command; None for anything unbound."""
    if key in ANY_MOD_BINDINGS:
        return ANY_MOD_BINDINGS[key]
    if bindings is None:
        bindings = DEFAULT_BINDINGS
    mods = _normalise_mods(mods)
    command = bindings.get(encode_keybinding(key, mods))
    if command is None and key in MOVE_KEYS:
        # arrows move with or without modifiers held
        command = bindings.get(encode_keybinding(key))
    return command

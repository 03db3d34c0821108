"""L1 entity: how the user's input was captured."""

from __future__ import annotations

import enum


class InputModality(enum.Enum):
    TEXT = 'text'
    VOICE = 'voice'
    PHOTO = 'photo'

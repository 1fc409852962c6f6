from __future__ import annotations

from tgobjects.core.relations import HasOne

from .base import TelegramObject
from .chat import Location


class PhotoSize(TelegramObject):
    pass


class _Thumbnailed(TelegramObject):
    def relations(self):
        return {"thumbnail": HasOne(PhotoSize)}


class Animation(_Thumbnailed):
    pass


class Audio(_Thumbnailed):
    pass


class DocumentFile(_Thumbnailed):
    """A general file (``document`` field of a message)."""


class Video(_Thumbnailed):
    pass


class VideoNote(_Thumbnailed):
    pass


class Voice(TelegramObject):
    pass


class Sticker(_Thumbnailed):
    pass


class Contact(TelegramObject):
    pass


class Dice(TelegramObject):
    pass


class Venue(TelegramObject):
    def relations(self):
        return {"location": HasOne(Location)}

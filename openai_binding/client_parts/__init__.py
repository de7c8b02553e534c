"""Per-resource mixins composed into :class:`openai_binding.client.Client`."""

from .transport import TransportMixin
from .completions import CompletionsMixin
from .media import MediaMixin
from .files import FilesMixin
from .fine_tunes import FineTunesMixin
from .chat import ChatMixin
from .audio import AudioMixin
from .assistants import AssistantsMixin
from .threads import ThreadsMixin
from .runs import RunsMixin

__all__ = [
    "TransportMixin",
    "CompletionsMixin",
    "MediaMixin",
    "FilesMixin",
    "FineTunesMixin",
    "ChatMixin",
    "AudioMixin",
    "AssistantsMixin",
    "ThreadsMixin",
    "RunsMixin",
]

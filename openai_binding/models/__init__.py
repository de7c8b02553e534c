"""Request and response models for every resource except chat.

Chat types live in :mod:`openai_binding.chat`.
"""

from .base import APIModel, DeletedObject, ListObject, ListParams, Usage
from .completions import (
    CompletionChoice,
    CreateCompletionRequest,
    CreateCompletionResponse,
    CreateEditRequest,
    CreateEditResponse,
    EditChoice,
    Model,
    ModelPermission,
    Models,
)
from .images import CreateImageRequest, CreateImageResponse, ImageData
from .embeddings import (
    CreateEmbeddingRequest,
    CreateEmbeddingResponse,
    CreateModerationRequest,
    CreateModerationResponse,
    Embedding,
    ModerationResult,
)
from .files import FileObject, ListFilesRequest, ListFilesResponse, UploadFileRequest
from .fine_tunes import (
    CreateFineTuneRequest,
    FineTune,
    FineTuneEvent,
    ListFineTuneEventsResponse,
    ListFineTunesResponse,
)
from .audio import CreateAudioTranscriptionRequest, CreateAudioTranscriptionResponse, CreateSpeechRequest
from .assistants import (
    Assistant,
    AssistantFile,
    CreateAssistantRequest,
    ListAssistantFilesResponse,
    ListAssistantsResponse,
    UpdateAssistantRequest,
)
from .threads import (
    CreateMessageRequest,
    CreateThreadRequest,
    InitialThreadMessage,
    ListMessageFilesResponse,
    ListMessagesResponse,
    MessageFile,
    Thread,
    ThreadMessage,
    ThreadMessageContent,
    UpdateMessageRequest,
    UpdateThreadRequest,
)
from .runs import (
    CreateRunRequest,
    CreateThreadAndRunRequest,
    InitialThread,
    ListRunStepsResponse,
    ListRunsResponse,
    Run,
    RunStep,
    SubmitToolOutputsRequest,
    TERMINAL_RUN_STATUSES,
    ToolOutput,
    UpdateRunRequest,
)

__all__ = [
    "APIModel",
    "DeletedObject",
    "ListObject",
    "ListParams",
    "Usage",
    "CompletionChoice",
    "CreateCompletionRequest",
    "CreateCompletionResponse",
    "CreateEditRequest",
    "CreateEditResponse",
    "EditChoice",
    "Model",
    "ModelPermission",
    "Models",
    "CreateImageRequest",
    "CreateImageResponse",
    "ImageData",
    "CreateEmbeddingRequest",
    "CreateEmbeddingResponse",
    "CreateModerationRequest",
    "CreateModerationResponse",
    "Embedding",
    "ModerationResult",
    "FileObject",
    "ListFilesRequest",
    "ListFilesResponse",
    "UploadFileRequest",
    "CreateFineTuneRequest",
    "FineTune",
    "FineTuneEvent",
    "ListFineTuneEventsResponse",
    "ListFineTunesResponse",
    "CreateAudioTranscriptionRequest",
    "CreateAudioTranscriptionResponse",
    "CreateSpeechRequest",
    "Assistant",
    "AssistantFile",
    "CreateAssistantRequest",
    "ListAssistantFilesResponse",
    "ListAssistantsResponse",
    "UpdateAssistantRequest",
    "CreateMessageRequest",
    "CreateThreadRequest",
    "InitialThreadMessage",
    "ListMessageFilesResponse",
    "ListMessagesResponse",
    "MessageFile",
    "Thread",
    "ThreadMessage",
    "ThreadMessageContent",
    "UpdateMessageRequest",
    "UpdateThreadRequest",
    "CreateRunRequest",
    "CreateThreadAndRunRequest",
    "InitialThread",
    "ListRunStepsResponse",
    "ListRunsResponse",
    "Run",
    "RunStep",
    "SubmitToolOutputsRequest",
    "TERMINAL_RUN_STATUSES",
    "ToolOutput",
    "UpdateRunRequest",
]

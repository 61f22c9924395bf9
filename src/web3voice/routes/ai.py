"""Audio transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from web3voice.dependencies import get_transcription_service
from web3voice.domain.models import TranscriptionRequest
from web3voice.interfaces import TranscriptionService
from web3voice.response_models import ProcessAudioRequest, TranscriptionResponse

router = APIRouter(prefix="/ai", tags=["ai"])

TranscriberDep = Annotated[TranscriptionService, Depends(get_transcription_service)]


@router.post("/process-audio", response_model=TranscriptionResponse)
def process_audio(
    body: ProcessAudioRequest, transcriber: TranscriberDep
) -> TranscriptionResponse:
    """Transcribes the audio at ``audioUrl``."""
    request = TranscriptionRequest(audio_url=body.audio_url or "")
    result = transcriber.transcribe(request)
    return TranscriptionResponse(transcription=result.text)
